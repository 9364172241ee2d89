import os
import time

import requests
import streamlit as st

# Configuration
API_URL = os.getenv("API_URL", "http://api:8000")
POLL_INTERVAL = 0.5

st.set_page_config(
    page_title="Random String Generator",
    page_icon="🎲",
    layout="centered"
)


def api(method: str, path: str, **kwargs):
    response = requests.request(method, f"{API_URL}{path}", timeout=30, **kwargs)
    response.raise_for_status()
    return response.json()


def settle_generation_state():
    """Show the outcome of the last request and put the service back to idle."""
    state = api("GET", "/strings/state")
    while state["status"] == "loading":
        time.sleep(POLL_INTERVAL)
        state = api("GET", "/strings/state")

    if state["status"] == "error":
        st.toast(state["message"], icon="⚠️")
        api("POST", "/strings/state/reset")
    elif state["status"] == "success":
        api("POST", "/strings/state/reset")
    return state


# Pending delete confirmation: None, "all" or a record id
if "confirm_delete" not in st.session_state:
    st.session_state.confirm_delete = None

title_col, action_col = st.columns([5, 1])
title_col.title("🎲 Random String Generator")
if action_col.button("🗑️", help="Delete all strings"):
    st.session_state.confirm_delete = "all"

try:
    state = settle_generation_state()
    listing = api("GET", "/strings")
except requests.exceptions.ConnectionError:
    st.error("Cannot connect to API ❌")
    st.stop()

# Input for string length
string_length = st.number_input("String Length", value=10, step=1)

if st.button("Generate Random String", use_container_width=True):
    with st.spinner("Generating..."):
        try:
            api("POST", "/strings/generate", json={"length": int(string_length)})
            settle_generation_state()
        except requests.exceptions.RequestException as e:
            st.error(f"Connection error: {str(e)}")
    st.rerun()

# Confirmation step before any destructive delete
target = st.session_state.confirm_delete
if target is not None:
    with st.container(border=True):
        if target == "all":
            st.subheader("Delete All Strings")
            st.write("Are you sure you want to delete all strings? This action cannot be undone.")
        else:
            st.subheader("Delete String")
            st.write("Are you sure you want to delete this string?")

        confirm_col, cancel_col = st.columns(2)
        if confirm_col.button("Delete", type="primary"):
            if target == "all":
                api("DELETE", "/strings")
            else:
                api("DELETE", f"/strings/{target}")
            st.session_state.confirm_delete = None
            st.rerun()
        if cancel_col.button("Cancel"):
            st.session_state.confirm_delete = None
            st.rerun()

strings = listing["strings"]
if strings:
    st.subheader(f"Generated Strings ({listing['count']})")
    for item in strings:
        with st.container(border=True):
            st.markdown(f"**Value:** `{item['value']}`")
            info_col, delete_col = st.columns([5, 1])
            info_col.write(f"Length: {item['length']}")
            info_col.caption(f"Created: {item['formatted_created']}")
            if delete_col.button("🗑️", key=f"delete-{item['id']}", help="Delete"):
                st.session_state.confirm_delete = item["id"]
                st.rerun()
else:
    st.info("No strings generated yet")
