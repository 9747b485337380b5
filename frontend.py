import streamlit as st
import pandas as pd
import requests

from app.services.api_client import BookingApiClient, BookingApiError
from app.services.validation import validate_booking

PAGE_SIZE = 5

# Page Config
st.set_page_config(
    page_title="Table Booking",
    page_icon="🍽️",
    layout="centered"
)

st.title("Restaurant Table Booking")

api = BookingApiClient()

if "page" not in st.session_state:
    st.session_state.page = 1

def call_api(fn, *args):
    """Runs an API call, showing the error instead of crashing the page."""
    try:
        return fn(*args)
    except BookingApiError as e:
        st.error(e.message)
    except requests.RequestException as e:
        st.error(f"Cannot reach the booking API: {e}")
    return None

rules = call_api(api.slots)
if rules is None:
    st.stop()

# --- Booking form ---
st.subheader("Make a booking")

# Outside the form so the slot list follows the chosen date and duration
day = st.date_input("Date", value=None)
hours = st.number_input("Hours", min_value=rules["min_hours"], max_value=rules["max_hours"], step=1, value=rules["min_hours"])

free_slots = []
if day:
    view = call_api(api.availability, day.isoformat(), int(hours))
    if view:
        free_slots = [slot["time"] for slot in view["slots"] if slot["available"]]
        if not free_slots:
            st.warning(f"No free tables on {day.isoformat()} for {int(hours)} hours.")

with st.form("booking_form", clear_on_submit=True):
    name = st.text_input("Name")
    contact = st.text_input("Contact number", max_chars=10)
    time = st.selectbox("Time", free_slots, index=None, placeholder="Select a time" if day else "Pick a date first")
    guests = st.number_input("Guests", min_value=rules["min_guests"], step=1, value=None)
    submitted = st.form_submit_button("Book table")

if submitted:
    payload = {
        "name": name,
        "contact": contact,
        "date": day.isoformat() if day else None,
        "time": time,
        "guests": int(guests) if guests is not None else None,
        "hours": int(hours),
    }
    errors = validate_booking(
        payload, rules["slots"],
        min_hours=rules["min_hours"], max_hours=rules["max_hours"], min_guests=rules["min_guests"],
    )
    if errors:
        for err in errors:
            st.error(err.message)
    else:
        booking = call_api(api.create_booking, payload)
        if booking:
            st.session_state.summary = booking
            st.session_state.page = 1
            st.rerun()

if st.session_state.get("summary"):
    b = st.session_state.summary
    st.success(
        f"Booked: **{b['name']}** · {b['date']} at {b['time']} · "
        f"{b['guests']} guests · {b['hours']} hours (contact {b['contact']})"
    )

# --- Bookings list ---
st.subheader("Bookings")

data = call_api(api.list_bookings, st.session_state.page, PAGE_SIZE)
if data is None:
    st.stop()

total_pages = max(data["totalPages"], 1)
if st.session_state.page > total_pages:
    # Last row of the last page was deleted
    st.session_state.page = total_pages
    st.rerun()

df = pd.DataFrame(data["bookings"])

if not df.empty:
    st.dataframe(
        df[["id", "name", "contact", "date", "time", "guests", "hours"]],
        use_container_width=True,
        hide_index=True,
    )

    to_delete = st.selectbox("Delete booking", df["id"].tolist(), index=None, placeholder="Select booking ID")
    if to_delete is not None and st.button("Delete"):
        if call_api(api.delete_booking, int(to_delete)) is not None:
            st.rerun()
else:
    st.info("No bookings yet.")

prev_col, label_col, next_col = st.columns(3)
if prev_col.button("Previous", disabled=st.session_state.page <= 1):
    st.session_state.page -= 1
    st.rerun()
label_col.write(f"Page {st.session_state.page} of {total_pages}")
if next_col.button("Next", disabled=st.session_state.page >= total_pages):
    st.session_state.page += 1
    st.rerun()
