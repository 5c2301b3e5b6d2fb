# app.py
"""
Streamlit UI for the order lookup widget.

Usage:
    streamlit run app.py
"""

import asyncio

import streamlit as st

from widget import init_widget
from utils import setup_logging


def render_result(widget) -> None:
    """Draw the widget's result area."""
    block = widget.result.block
    if block is None:
        return
    if block.kind == "error":
        st.error(block.text)
    else:
        st.code(block.text, language="json")


def main() -> None:
    setup_logging()
    st.set_page_config(page_title="Order Lookup", layout="wide")
    st.title("Order Lookup")

    if "widget" not in st.session_state:
        st.session_state["widget"] = init_widget()
    widget = st.session_state["widget"]

    # A form submits on Enter in the text input as well as on the button.
    with st.form("order_lookup"):
        order_uid = st.text_input("Order UID:", placeholder="b563feb7b2b84b6test")
        submitted = st.form_submit_button("Search", type="primary")

    if submitted:
        with st.spinner("Looking up order..."):
            asyncio.run(widget.on_click(order_uid))

    render_result(widget)


if __name__ == "__main__":
    main()
