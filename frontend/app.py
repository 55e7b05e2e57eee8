import os

import httpx
import streamlit as st

from frontend.messages import error_message, to_message

BACKEND_URL = os.environ.get("BACKEND_URL", "http://localhost:8000/api/query")

st.set_page_config(page_title="Titan Text Playground", layout="centered")
st.title("Titan Text Playground")

# Chat history
if "messages" not in st.session_state:
    st.session_state.messages = []


def _render(msg: dict) -> None:
    if msg.get("error"):
        st.error(msg["error"])
    else:
        st.markdown(msg["content"])
    if msg.get("filtered"):
        st.warning("The model filtered this response (content policy).")
    if msg.get("raw"):
        with st.expander("Raw model output"):
            st.json(msg["raw"])


# Render previous messages
for msg in st.session_state.messages:
    with st.chat_message(msg["role"]):
        _render(msg)

# User input
if prompt := st.chat_input("Ask the model anything..."):
    st.session_state.messages.append({"role": "user", "content": prompt})
    with st.chat_message("user"):
        st.markdown(prompt)

    with st.chat_message("assistant"):
        with st.spinner("Waiting for the model..."):
            try:
                response = httpx.post(
                    BACKEND_URL,
                    json={"user_query": prompt},
                    timeout=120.0,
                )
                message = to_message(response.status_code, response.json())
            except httpx.ConnectError:
                message = error_message(
                    "Could not connect to backend. "
                    "Make sure the FastAPI server is running on http://localhost:8000"
                )
            except httpx.HTTPError as exc:
                message = error_message(f"Request to backend failed: {exc}")
            except ValueError:
                # response.json() on a non-JSON reply
                message = error_message(
                    f"Backend returned a non-JSON reply (HTTP {response.status_code})"
                )

        _render(message)
        st.session_state.messages.append(message)
