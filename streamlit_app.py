import streamlit as st

from unica.tables import library_frame, library_kpis
from unica.ui import show_logo, header, chips_row, kpi_row
from unica import client

# Page config MUST be first before any output
st.set_page_config(page_title="AgenticAI for Unica", page_icon="📦", layout="wide")

# Sidebar navigation
st.sidebar.title("AgenticAI for Unica")
st.sidebar.page_link("pages/00_📦_Shipment_Simulation.py", label="出荷シミュレーション")
st.sidebar.page_link("pages/01_👔_Manager_Chat.py", label="田上本部長に相談")

# Header
col_logo, col_title = st.columns([1, 5])
with col_logo:
    show_logo(width=180)
with col_title:
    header("AgenticAI for Unica", "納期回答自動支援モジュール")

chips_row([("API: 稼働中", "success") if client.api_up() else ("API: 未接続（本部長チャットは利用不可）", "warn")])

# Template library overview
df_library = library_frame()
kpi_row(library_kpis(df_library))
st.divider()
st.subheader("登録済みシミュレーションテンプレート")
st.dataframe(df_library, hide_index=True, use_container_width=True)
st.caption("AgenticAIの提案はAIによる推論です。重要な意思決定は要確認のうえご利用ください。")
