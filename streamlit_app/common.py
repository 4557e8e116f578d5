"""Shared DB and cart helpers for the Streamlit storefront."""

import streamlit as st
from sqlalchemy.orm import Session

from friterie.db.base import Base
from friterie.db.session import SessionLocal, engine
from friterie.services.cart import Cart

Base.metadata.create_all(bind=engine)

CART_KEY = "cart"


def get_session() -> Session:
    return SessionLocal()


def get_cart() -> Cart:
    """Cart kept for the browser session; lost when the tab is closed."""
    if CART_KEY not in st.session_state:
        st.session_state[CART_KEY] = Cart()
    return st.session_state[CART_KEY]
