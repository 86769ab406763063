import streamlit as st

from dashboard import metrics, navigation
from dashboard.calendar_grid import entry_day
from dashboard.constants import mood_meta
from dashboard.visualizations import build_share_bar_html, build_trend_html


def _money(value):
    return f"${abs(value):,.2f}"


def _render_quick_stats(mood_stats, money_stats):
    cols = st.columns(4)
    cols[0].metric("Mood Check-ins", mood_stats["total_entries"], help="total entries")
    cols[1].metric("Avg Productivity", f"{mood_stats['avg_productivity']:.1f}", help="out of 10")
    net = money_stats["net_balance"]
    cols[2].metric("Net Balance", _money(net), delta="positive" if net >= 0 else "negative",
                   delta_color="normal" if net >= 0 else "inverse")
    cols[3].metric("Current Streak", f"{mood_stats['current_streak']} days")


def _render_mood_card(mood_entries, mood_stats):
    st.markdown("<div class='section-title'>🧠 Mood & Productivity</div>", unsafe_allow_html=True)
    st.caption("Daily check-ins and mental health tracking")
    cols = st.columns(3)
    cols[0].metric("Total Entries", mood_stats["total_entries"])
    cols[1].metric("Avg Productivity", f"{mood_stats['avg_productivity']:.1f}")
    cols[2].metric("This Week", mood_stats["this_week"])
    st.markdown("<div class='small-label'>Recent Mood Trend</div>", unsafe_allow_html=True)
    st.markdown(build_trend_html(metrics.recent_mood_trend(mood_entries)), unsafe_allow_html=True)


def _render_financial_card(financial_entries, money_stats):
    st.markdown("<div class='section-title'>💰 Financial Tracker</div>", unsafe_allow_html=True)
    st.caption("Income, expenses, and financial analytics")
    if st.button("Open Financial Tracker →", key="overview.open_financial"):
        navigation.navigate(navigation.FINANCIAL)
    cols = st.columns(3)
    cols[0].metric("Total Income", f"${money_stats['total_income']:,.0f}")
    cols[1].metric("Total Expenses", f"${money_stats['total_expenses']:,.0f}")
    cols[2].metric("This Month", money_stats["this_month"])
    income_share, expense_share = metrics.income_expense_shares(financial_entries)
    st.markdown("<div class='small-label'>Income vs Expenses</div>", unsafe_allow_html=True)
    st.markdown(build_share_bar_html("Inc", income_share, "#22C55E"), unsafe_allow_html=True)
    st.markdown(build_share_bar_html("Exp", expense_share, "#EF4444"), unsafe_allow_html=True)


def _render_recent_checkins(ctx, mood_entries):
    st.markdown("<div class='section-title'>Recent Mood Check-ins</div>", unsafe_allow_html=True)
    if not mood_entries:
        st.caption("No mood entries yet. Start tracking your mood and productivity.")
        return
    for entry in mood_entries[:5]:
        meta = mood_meta(entry.get("mood"))
        day = entry_day(entry, tz=ctx.timezone)
        day_label = day.strftime("%b %d, %Y") if day else "-"
        st.markdown(f"{meta['emoji']} **{meta['label']}**")
        st.caption(f"Productivity: {entry.get('productivity')}/10 • {day_label}")


def _render_recent_transactions(financial_entries):
    st.markdown("<div class='section-title'>Recent Transactions</div>", unsafe_allow_html=True)
    if not financial_entries:
        st.caption("No transactions yet. Start tracking your finances.")
        return
    for entry in financial_entries[:5]:
        is_income = entry.get("type") == "income"
        sign = "+" if is_income else "-"
        css = "amount-positive" if is_income else "amount-negative"
        day = entry_day(entry, field="date")
        left, right = st.columns([3, 1])
        with left:
            st.markdown(f"{'💰' if is_income else '💸'} **{entry.get('description')}**")
            st.caption(day.strftime("%b %d, %Y") if day else "-")
        with right:
            st.markdown(
                f"<span class='{css}'>{sign}${float(entry.get('amount') or 0):,.2f}</span>",
                unsafe_allow_html=True,
            )


def render_overview_tab(ctx):
    mood_entries = ctx.get("mood_entries", [])
    financial_entries = ctx.get("financial_entries", [])
    mood_stats = metrics.summarize_mood(mood_entries, ctx.now(), tz=ctx.timezone)
    money_stats = metrics.summarize_financial(financial_entries, ctx.today())

    st.markdown("<div class='section-title'>Your Personal Widgets Overview</div>", unsafe_allow_html=True)
    st.caption("Track everything that matters to you - mood, productivity, and finances - all in one place.")
    _render_quick_stats(mood_stats, money_stats)

    left, right = st.columns(2)
    with left:
        _render_mood_card(mood_entries, mood_stats)
    with right:
        _render_financial_card(financial_entries, money_stats)

    left, right = st.columns(2)
    with left:
        _render_recent_checkins(ctx, mood_entries)
    with right:
        _render_recent_transactions(financial_entries)
