import logging
from typing import Optional

import streamlit as st

from config import DEFAULT_USER_ID

logger = logging.getLogger(__name__)


def _to_int(value) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def current_user_id(session_state=None) -> Optional[int]:
    """
    Id of the signed-in user.
    The login flow stores {"id": ..., ...} under session_state["user"];
    DEFAULT_USER_ID is used when nobody has signed in (local setups).
    """
    state = st.session_state if session_state is None else session_state

    user = state.get("user")
    if isinstance(user, dict):
        uid = _to_int(user.get("id"))
        if uid:
            return uid

    uid = _to_int(DEFAULT_USER_ID)
    if uid:
        return uid

    logger.debug("no authenticated user in session")
    return None
