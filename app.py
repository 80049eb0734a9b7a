import pandas as pd
import streamlit as st
from pathlib import Path
import sys
import time

# Add current directory to path
sys.path.append(str(Path(__file__).parent))

import config
from aggregator import ALL_MONTHS, monthly_summary, to_frame
from api_client import ApiError
from charts import income_vs_expense_monthly
from controller import ExpenseTracker
from entry_form import CATEGORIES, PendingEntry, ValidationError
from formatting import currency, month_label
from logging_setup import configure_logging

# --- Configuration ---
st.set_page_config(page_title=config.PAGE_TITLE, layout="centered", page_icon="💰")
configure_logging(config.LOG_LEVEL)

st.markdown("""
<style>
    .stApp {
        background: #eef2f5;
    }
    .block-container {
        max-width: 900px !important;
    }
    .total-income {
        color: #28a745;
        font-weight: bold;
    }
    .total-expense {
        color: #dc3545;
        font-weight: bold;
    }
    .month-header {
        background-color: #e9ecef;
        padding: 10px 12px;
        font-weight: bold;
        font-size: 1.2em;
        color: #495057;
        border-radius: 4px;
        margin-top: 10px;
    }
</style>
""", unsafe_allow_html=True)

# --- State ---
if "tracker" not in st.session_state:
    st.session_state.tracker = ExpenseTracker()

if "form_nonce" not in st.session_state:
    st.session_state.form_nonce = 0


def get_tracker() -> ExpenseTracker:
    return st.session_state.tracker


def _after_write(message: str):
    """Shows the outcome, then reruns the page on freshly loaded data."""
    st.success(message)
    st.session_state.form_nonce += 1
    time.sleep(1)
    st.rerun()


def _amount_colors(row):
    signed = row["Signed"]
    if pd.isna(signed):
        return [""] * len(row)
    color = "red" if signed < 0 else "green"
    return [f"color: {color}" if col == "Amount (HUF)" else "" for col in row.index]


def render_rows(transactions):
    frame = to_frame(transactions)
    st.dataframe(
        frame.style.apply(_amount_colors, axis=1),
        column_config={"Signed": None},
        hide_index=True,
        use_container_width=True,
    )


tracker = get_tracker()
if not tracker.loaded:
    tracker.load()
nonce = st.session_state.form_nonce

st.title(config.PAGE_TITLE)

if tracker.load_error:
    st.error(f"Could not load transactions. {tracker.load_error}")
    if st.button("Retry"):
        tracker.reload()
        st.rerun()

# --- Statement Upload ---
with st.container(border=True):
    uploaded = st.file_uploader(
        "PDF File:",
        type=["pdf"],
        help="Upload your PDF statement",
        key=f"statement_{nonce}",
    )
    if st.button("Upload"):
        try:
            with st.spinner("Processing statement..."):
                message = tracker.upload_statement(
                    uploaded.name if uploaded else None,
                    uploaded.getvalue() if uploaded else None,
                )
        except ValidationError as e:
            st.warning(str(e))
        except ApiError as e:
            st.error(f"Upload failed: {e}")
        else:
            _after_write(message)

# --- Manual Entry ---
with st.container(border=True):
    st.subheader("Manual Entry")
    col1, col2 = st.columns(2)
    entry_date = col1.date_input("Date:", key=f"entry_date_{nonce}", help="Select transaction date")
    category = col2.selectbox(
        "Type",
        CATEGORIES,
        index=None,
        placeholder="-- Select Type --",
        key=f"entry_category_{nonce}",
        help="Select transaction type",
    )
    col3, col4 = st.columns(2)
    raw_amount = col3.text_input(
        "Amount",
        placeholder="Amount",
        disabled=category is None,
        key=f"entry_amount_{nonce}",
    )
    description = col4.text_input("Description", placeholder="Description", key=f"entry_description_{nonce}")

    if st.button("Add Transaction"):
        pending = PendingEntry(
            date=entry_date,
            category=category or "",
            description=description,
            raw_amount=raw_amount,
        )
        try:
            message = tracker.submit_entry(pending)
        except ValidationError as e:
            st.warning(str(e))
        except ApiError as e:
            st.error(f"Could not save the transaction: {e}")
        else:
            _after_write(message)

# --- View Expenses ---
with st.container(border=True):
    st.subheader("View Expenses")

    options = tracker.month_options()
    if tracker.scope not in options:
        tracker.select(ALL_MONTHS)
    selected = st.selectbox(
        "Filter by month",
        options,
        index=options.index(tracker.scope),
        format_func=lambda key: "All Months" if key == ALL_MONTHS else month_label(key),
    )
    tracker.select(selected)

    sums = tracker.current_totals()
    c1, c2 = st.columns(2)
    c1.markdown(f'Total Income: <span class="total-income">{currency(sums.income)}</span>', unsafe_allow_html=True)
    c2.markdown(f'Total Spending: <span class="total-expense">{currency(sums.expense)}</span>', unsafe_allow_html=True)

    visible = tracker.visible()
    if not visible:
        st.info("No transactions for this period.")
    elif tracker.scope == ALL_MONTHS:
        for month_key, month_txns in tracker.grouped.items():
            st.markdown(f'<div class="month-header">{month_label(month_key)}</div>', unsafe_allow_html=True)
            render_rows(month_txns)
    else:
        render_rows(visible)

summary = monthly_summary(tracker.grouped)
if len(summary) > 1:
    with st.expander("📈 Monthly trend"):
        st.plotly_chart(income_vs_expense_monthly(summary), use_container_width=True)
