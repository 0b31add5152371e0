# Streamlit glue: one PolicySettings per browser session, backed by the store.

import streamlit as st

from faculty_pay.logging_config import configure_logging
from faculty_pay.settings import PolicySettings, SettingsStore

_SETTINGS_KEY = "policy_settings"


@st.cache_resource
def get_store():
    configure_logging()
    return SettingsStore()


def get_settings() -> PolicySettings:
    if _SETTINGS_KEY not in st.session_state:
        st.session_state[_SETTINGS_KEY] = get_store().load()
    return st.session_state[_SETTINGS_KEY]


def save_settings(settings: PolicySettings):
    st.session_state[_SETTINGS_KEY] = settings
    get_store().save(settings)


def reset_settings():
    st.session_state[_SETTINGS_KEY] = get_store().reset()
    return st.session_state[_SETTINGS_KEY]
