# client/view.py

import json

import streamlit as st

from cookieauth.client.api import ApiClient
from cookieauth.client.shell import GET_PROTECTED, LOGIN, LOGOUT, ClientShell
from cookieauth.shared.config import load_config

# The page logs in with the default admin pair; there is no login form.
DEMO_USERNAME = "admin"
DEMO_PASSWORD = "password"


def _remember_alert(message: str) -> None:
    # Shown after the rerun triggered by the button click.
    st.session_state["alert"] = message


def _shell() -> ClientShell:
    if "shell" not in st.session_state:
        config = load_config().client
        api = ApiClient(config.api_url, timeout=config.timeout)
        st.session_state["shell"] = ClientShell(api, alert=_remember_alert)
    return st.session_state["shell"]


def main_page():
    shell = _shell()
    st.title("Simple backend")

    handlers = {
        LOGIN: lambda: shell.handle_login(DEMO_USERNAME, DEMO_PASSWORD),
        LOGOUT: shell.handle_logout,
        GET_PROTECTED: shell.handle_protected,
    }
    for label in shell.actions():
        if st.button(label, key=label):
            handlers[label]()
            st.rerun()

    alert = st.session_state.pop("alert", None)
    if alert:
        st.error(alert)

    if shell.data:
        st.code(json.dumps(shell.data), language="json")


main_page()
