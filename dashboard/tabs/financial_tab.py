import streamlit as st

from dashboard import metrics
from dashboard.constants import CATEGORIES_BY_TYPE, ENTRY_TYPES
from dashboard.data import repositories
from dashboard.data.loaders import financial_frame
from dashboard.state import session_slices
from dashboard.visualizations import category_breakdown_chart

SLICE = "financial"
HISTORY_LIMIT = 20
FORM_KEYS = ["financial.amount", "financial.description", "financial.category", "financial.date"]


def _render_stats(stats):
    cols = st.columns(6)
    cols[0].metric("Total Income", f"${stats['total_income']:,.2f}")
    cols[1].metric("Total Expenses", f"${stats['total_expenses']:,.2f}")
    net = stats["net_balance"]
    cols[2].metric("Net Balance", f"${abs(net):,.2f}", delta="positive" if net >= 0 else "negative",
                   delta_color="normal" if net >= 0 else "inverse")
    cols[3].metric("This Month", stats["this_month"])
    cols[4].metric("Avg Expense", f"${stats['avg_expense']:,.2f}")
    cols[5].metric("Avg Income", f"${stats['avg_income']:,.2f}")


def _render_form(ctx):
    session_slices.reset_widgets_if_requested(SLICE, FORM_KEYS)
    session_slices.render_flash(SLICE)
    st.markdown("<div class='section-title'>Add Transaction</div>", unsafe_allow_html=True)

    # Outside the form so the category list follows the selected type.
    entry_type = st.radio(
        "Type",
        ENTRY_TYPES,
        key="financial.type",
        format_func=lambda value: "💸 Expense" if value == "expense" else "💰 Income",
        horizontal=True,
    )
    categories = CATEGORIES_BY_TYPE[entry_type]
    category_labels = {item["value"]: item["label"] for item in categories}
    if st.session_state.get("financial.category") not in category_labels:
        st.session_state.pop("financial.category", None)

    with st.form("financial.add", clear_on_submit=False):
        st.number_input("Amount", min_value=0.0, step=0.01, format="%.2f", key="financial.amount")
        st.text_input("Description", key="financial.description")
        st.selectbox(
            "Category",
            list(category_labels),
            index=None,
            format_func=category_labels.get,
            placeholder="Select a category",
            key="financial.category",
        )
        st.date_input("Date", value=ctx.today(), key="financial.date")
        submitted = st.form_submit_button(
            f"Add {entry_type.title()}",
            disabled=session_slices.is_busy(SLICE),
            type="primary",
        )

    if not submitted:
        return
    amount = float(st.session_state.get("financial.amount") or 0)
    description = str(st.session_state.get("financial.description") or "").strip()
    category = st.session_state.get("financial.category")
    if amount <= 0 or not description or not category:
        st.error("Amount, description and category are required.")
        return

    session_slices.set_busy(SLICE, True)
    try:
        with st.spinner("Saving..."):
            repositories.save_financial_entry(
                ctx,
                {
                    "type": entry_type,
                    "amount": amount,
                    "description": description,
                    "category": category,
                    "date": st.session_state.get("financial.date") or ctx.today(),
                },
            )
    except repositories.EntryWriteError:
        st.error("Could not save this transaction. Please try again.")
        return
    finally:
        session_slices.set_busy(SLICE, False)

    session_slices.flash(SLICE, "success", "Transaction added!")
    session_slices.request_widget_reset(SLICE)
    st.rerun()


def _render_breakdown(entries):
    st.markdown("<div class='section-title'>Expense Breakdown</div>", unsafe_allow_html=True)
    breakdown = metrics.category_breakdown(entries, "expense")
    if not breakdown:
        st.caption("No expenses recorded yet.")
        return
    st.plotly_chart(category_breakdown_chart(breakdown), use_container_width=True)
    for row in breakdown:
        st.markdown(
            f"<span class='share-dot' style='display:inline-block;background:{row['color']};'></span> "
            f"**{row['label']}** · ${row['total']:,.2f} · {row['percentage']:.1f}% · "
            f"{row['count']} transaction{'s' if row['count'] != 1 else ''}",
            unsafe_allow_html=True,
        )


def _render_history(entries):
    st.markdown("<div class='section-title'>Transaction History</div>", unsafe_allow_html=True)
    if not entries:
        st.caption("No transactions yet. Add your first income or expense above.")
        return
    st.dataframe(
        financial_frame(entries[:HISTORY_LIMIT]),
        hide_index=True,
        use_container_width=True,
        column_config={"amount": st.column_config.NumberColumn("Amount", format="$%.2f")},
    )
    if len(entries) > HISTORY_LIMIT:
        st.caption(f"Showing the {HISTORY_LIMIT} most recent of {len(entries)} transactions.")


def render_financial_tab(ctx):
    entries = ctx.get("financial_entries", [])
    _render_stats(metrics.summarize_financial(entries, ctx.today()))
    left, right = st.columns([2, 3])
    with left:
        _render_form(ctx)
    with right:
        _render_breakdown(entries)
    _render_history(entries)
