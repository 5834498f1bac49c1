"""
活動報名頁面主應用程式
Event Registration Page
"""
import logging
import streamlit as st

from event_registration.ui.registration_page import render_registration_page
from event_registration.utils.config import configure_logging
from event_registration.utils.url_utils import read_page_address

logger = logging.getLogger(__name__)


# Streamlit 頁面配置
st.set_page_config(
    page_title="Event Registration",
    page_icon="📝",
    layout="centered",
    initial_sidebar_state="collapsed"
)


def apply_custom_css():
    """套用自訂 CSS 樣式。"""
    st.markdown("""
        <style>
        /* 全域樣式 */
        .stApp {
            background: linear-gradient(to left, #1f2937f2, #111827f2);
        }

        /* 隱藏 Streamlit 預設元素 */
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
        header, [data-testid="stHeader"] {
            visibility: hidden;
            height: 0;
        }

        /* 主要卡片 */
        [data-testid="stAppViewContainer"] > .main .block-container {
            padding-top: 3rem;
            background: #353c49;
            border-radius: 12px;
        }

        /* 按鈕樣式 */
        .stButton > button, .stLinkButton > a {
            border-radius: 12px;
            font-weight: 700;
            transition: all 0.3s;
        }

        .stButton > button[kind="primary"] {
            background: #6b7280;
            color: white;
            border: none;
        }

        .stButton > button[kind="primary"]:hover {
            background: #9ca3af;
            color: black;
        }

        /* 輸入框樣式 */
        .stTextInput > div > div > input {
            background: #494f5b;
            border: 2px solid #d1d5db;
            border-radius: 12px;
            color: #ffffff;
        }

        /* 選擇框樣式 */
        .stSelectbox > div > div {
            background: #494f5b;
            border: 2px solid #d1d5db;
            border-radius: 8px;
            color: #ffffff;
        }
        </style>
    """, unsafe_allow_html=True)


def render_current_page():
    """根據網址參數渲染報名頁面。"""
    company_name, event_id = read_page_address(st.query_params)

    try:
        if not company_name or not event_id:
            st.error("Event not found or no longer available")
            return

        render_registration_page(company_name, event_id)

    except Exception as e:
        # 錯誤邊界
        logger.exception("Unhandled exception while rendering registration page")
        st.error("Something went wrong. Please try again later.")

        with st.expander("🔍 Error details"):
            st.code(str(e))


def main():
    """主應用程式入口。"""
    configure_logging()
    apply_custom_css()
    render_current_page()


if __name__ == "__main__":
    main()
