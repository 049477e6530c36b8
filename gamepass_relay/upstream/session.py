# gamepass_relay/upstream/session.py

import requests

from gamepass_relay import __version__

USER_AGENT = f"gamepass-relay/{__version__}"


def get_session() -> requests.Session:
    # one session per fetch, closed by the caller
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
    return session
