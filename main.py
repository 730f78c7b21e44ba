# main.py - Streamlit lookup page
"""
BK-tree fuzzy lookup - Streamlit page
Loads a word list into a BK-tree and lists the words within a radius of a query.
"""

import logging

import pandas as pd
import streamlit as st

from bktree import BKTree, get_metric, hamming_distance, load_word_list
from bktree.config import UI_CONFIG
from bktree.distance import DISTANCE_FUNCTIONS
from bktree.ui_utils import clamp_radius, counted_search, format_pruning_ratio, results_to_records
from bktree.utils import get_default_metric, get_default_radius, get_max_radius

logging.basicConfig(level=logging.WARNING)

st.set_page_config(
    page_title=UI_CONFIG["page_title"],
    page_icon=UI_CONFIG["page_icon"],
    layout="wide",
)


@st.cache_resource(show_spinner="Building the BK-tree...")
def build_tree(words_path: str, metric: str, length: int = 0):
    """Build (once per word list, metric and length filter) the shared tree"""
    words = load_word_list(words_path or None)
    if length:
        words = [word for word in words if len(word) == length]
    tree = BKTree(get_metric(metric), words)
    return tree, len(words)


def render_sidebar():
    """Search settings"""
    st.sidebar.header("⚙️ Settings")
    words_path = st.sidebar.text_input(
        "Word list", value="", help="Leave empty to use BKTREE_WORDS_PATH or the system dictionary"
    )
    metrics = sorted(name for name in DISTANCE_FUNCTIONS if name != "absolute")
    default_metric = get_default_metric()
    metric = st.sidebar.selectbox(
        "Distance",
        metrics,
        index=metrics.index(default_metric) if default_metric in metrics else 0,
    )
    max_radius = get_max_radius()
    radius = st.sidebar.slider(
        "Radius", min_value=0, max_value=max_radius, value=clamp_radius(get_default_radius(), max_radius)
    )
    return words_path.strip(), metric, radius


def main():
    st.title(f"{UI_CONFIG['page_icon']} {UI_CONFIG['page_title']}")
    words_path, metric, radius = render_sidebar()

    query = st.text_input("Query", value="exaple")
    if not query:
        st.info("Type a word to look up.")
        return

    length = len(query) if get_metric(metric) is hamming_distance else 0
    try:
        tree, total = build_tree(words_path, metric, length)
    except (FileNotFoundError, UnicodeDecodeError) as e:
        st.error(f"Could not load the word list: {e}")
        return

    results, calls = counted_search(tree, query, radius)

    col1, col2, col3 = st.columns(3)
    col1.metric("Matches", len(results))
    col2.metric("Distance evaluations", f"{calls} / {total}")
    col3.metric("Words skipped", format_pruning_ratio(calls, total))

    records = results_to_records(results, limit=UI_CONFIG["max_rows"])
    if records:
        st.dataframe(pd.DataFrame(records), use_container_width=True, hide_index=True)
        if len(results) > len(records):
            st.caption(f"Showing the {len(records)} nearest of {len(results)} matches.")
    else:
        st.warning("No word within this radius.")


main()
