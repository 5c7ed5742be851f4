"""
WatchDog - Main Streamlit Application

Net worth ranking for national assembly members and government officials,
computed from public asset disclosures.
"""
import asyncio

import streamlit as st

from disclosure_watchdog.analysis.formatting import format_money, format_change
from disclosure_watchdog.config.constants import PARTY_COLORS, DEFAULT_PARTY_COLOR
from disclosure_watchdog.config.settings import settings
from disclosure_watchdog.models.disclosure import Bucket, Population, PersonSummary
from disclosure_watchdog.services.summaries import SortKey

from resources import get_service


# ============================================================================
# Page Configuration
# ============================================================================

st.set_page_config(
    page_title=f"{settings.APP_NAME} - 국회의원 재산 지도",
    page_icon="🕵️",
    layout="wide",
    initial_sidebar_state="expanded"
)


POPULATION_LABELS = {
    Population.ASSEMBLY: "🏛️ 국회의원",
    Population.GOVERNMENT: "🏢 고위공직자",
}

SORT_LABELS = {
    SortKey.NET_WORTH: "순자산",
    SortKey.CHANGE_AMOUNT: "증감액",
    SortKey.CHANGE_RATE: "증감률",
    SortKey.REAL_ESTATE: "부동산",
    SortKey.FINANCIAL: "예금/증권/현금",
    SortKey.VIRTUAL_ASSET: "가상자산",
    SortKey.VEHICLE: "자동차",
    SortKey.DEBT: "채무",
    SortKey.NAME: "이름",
}


def party_color(label: str) -> str:
    for keyword, color in PARTY_COLORS.items():
        if keyword in label:
            return color
    return DEFAULT_PARTY_COLOR


# ============================================================================
# UI Components
# ============================================================================

def display_member_card(rank: int, summary: PersonSummary):
    """Display one person in the ranking"""
    with st.container(border=True):
        col1, col2, col3 = st.columns([1, 3, 2])

        with col1:
            if summary.image_url:
                st.image(summary.image_url, width=64)
            else:
                st.markdown("## 👤" if summary.population == Population.ASSEMBLY else "## 🏢")

        with col2:
            st.markdown(f"### {rank}위 {summary.name}")
            st.caption(
                f"{party_color(summary.affiliation_label)} {summary.affiliation_label} · "
                f"{summary.secondary_label}"
            )

        with col3:
            st.metric(
                "순자산 (빚 제외)",
                format_money(summary.net_worth),
                delta=format_change(summary.change_amount, summary.change_rate_percent),
                delta_color="off",
            )

        if st.button("상세 보기", key=f"view_{summary.population.value}_{rank}_{summary.name}"):
            st.session_state["selected_member"] = summary.name
            st.session_state["selected_population"] = summary.population.value
            st.switch_page("pages/1_👤_Member_Detail.py")


# ============================================================================
# Main Application
# ============================================================================

def main():
    """Main application"""

    st.caption(f"🕵️‍♀️ 국회의원 재산 감시 프로젝트 **{settings.APP_NAME}**")
    st.title("대한민국 국회의원 재산 지도")
    st.markdown("공직자 윤리위원회 데이터와 국회 정보를 결합하여 실제 순자산(빚 제외)을 분석했습니다.")

    st.divider()

    # Controls
    col1, col2, col3, col4 = st.columns([2, 3, 2, 2])

    with col1:
        view = st.query_params.get("view", Population.ASSEMBLY.value)
        default_index = 1 if view == Population.GOVERNMENT.value else 0
        population = st.radio(
            "대상",
            list(POPULATION_LABELS),
            index=default_index,
            format_func=lambda p: POPULATION_LABELS[p],
            horizontal=True,
        )

    with col2:
        query = st.text_input(
            "검색",
            placeholder="이름, 정당, 지역구 검색 (예: 종로구)",
        )

    with col3:
        sort_by = st.selectbox("정렬", list(SORT_LABELS), format_func=lambda k: SORT_LABELS[k])

    with col4:
        category_options = [None] + [b for b in Bucket if b != Bucket.OTHER]
        category = st.selectbox(
            "보유 자산",
            category_options,
            format_func=lambda b: "전체" if b is None else f"{b.emoji} {b.label}",
        )

    with st.spinner("데이터를 분석하고 있습니다..."):
        try:
            service = get_service()
            results = asyncio.run(service.search(
                population,
                query=query,
                sort_by=sort_by,
                descending=sort_by != SortKey.NAME,
                category=category,
            ))
        except Exception as e:
            st.error(f"데이터를 불러오지 못했습니다: {e}")
            return

    st.subheader(f"📊 재산 순위 (Top {len(results)})")

    if not results:
        st.info("검색 결과가 없습니다 😢")
        return

    for rank, summary in enumerate(results, start=1):
        display_member_card(rank, summary)


# ============================================================================
# Sidebar
# ============================================================================

with st.sidebar:
    st.markdown("## ℹ️ About")
    st.markdown("공직자 재산공개 자료를 부동산, 금융, 가상자산, 자동차, 채무로 분류해 순자산을 계산합니다.")
    st.caption("금액 단위: 신고 금액(천원) × 1,000")

    st.divider()

    if st.button("🔄 데이터 새로고침"):
        get_service().refresh()
        st.rerun()

    st.caption("Built with Streamlit + MongoDB")


# ============================================================================
# Run Application
# ============================================================================

if __name__ == "__main__":
    main()
