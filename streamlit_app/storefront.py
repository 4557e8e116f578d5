"""Public menu page with cart and WhatsApp checkout."""

import streamlit as st

from friterie.core.config import settings
from friterie.services.menu_service import list_categories_with_items
from friterie.services.pricing import RangePrice, format_amount, parse_price
from friterie.services.status_service import StatusStore
from streamlit_app.common import get_cart, get_session

st.set_page_config(page_title="Menu", layout="wide")
st.title("Notre menu")

status = StatusStore(settings.status_file).get()
if status.is_open:
    st.success(status.message or "Nous sommes ouverts !")
else:
    st.error(status.message or "Nous sommes actuellement fermés.")

cart = get_cart()
menu_column, cart_column = st.columns([3, 1])

with get_session() as db:
    categories = list_categories_with_items(db)

with menu_column:
    if not categories:
        st.info("Le menu est en cours de préparation.")
    for category in categories:
        st.subheader(category.label)
        for item in category.items:
            title = f"⭐ {item.name}" if item.highlight else item.name
            price = parse_price(item.price)
            caption = item.price
            if isinstance(price, RangePrice):
                caption = f"{format_amount(price.low)} / {format_amount(price.high)}"
            left, right = st.columns([4, 1])
            with left:
                st.markdown(f"**{title}** - {caption}")
                st.caption(item.description)
                if item.image:
                    st.image(f"{settings.public_base_url.rstrip('/')}{item.image}", width=160)
            with right:
                if st.button("Ajouter", key=f"add_{category.id}_{item.id}"):
                    cart.add(item, category.id)
                    st.rerun()

with cart_column:
    st.subheader(f"Panier ({cart.total_items()})")
    if not cart.lines:
        st.write("Votre panier est vide.")
    for line in list(cart.lines):
        quantity = st.number_input(
            line.name,
            min_value=0,
            step=1,
            value=line.quantity,
            key=f"qty_{line.category_id}_{line.name}",
        )
        if quantity != line.quantity:
            cart.update_quantity(line.name, line.category_id, int(quantity))
            st.rerun()
    if cart.lines:
        st.markdown(f"**Total : {cart.total_price()}**")
        st.link_button("Commander via WhatsApp", cart.whatsapp_url(settings.whatsapp_phone))
        if st.button("Vider le panier"):
            cart.clear()
            st.rerun()
