"""
Streamlit Dashboard for the Feedback Insights Analyser

Paste feedback (one item per line), run the analysis and browse the
sentiment breakdown, top themes and insights.
"""
import streamlit as st
import pandas as pd
import plotly.express as px

from models.feedback import AnalysisResult
from pipeline.run_analysis import analyze_feedback, split_feedback_lines
from utils.logger import get_logger

logger = get_logger(__name__)

EXAMPLE_FEEDBACK = "\n".join([
    "I love the new dark mode, it looks amazing!",
    "The app crashes every time I try to upload a photo on Android.",
    "Customer support is terrible, no one replies to my tickets.",
    "Pricing is too high for the value provided.",
    "The login screen is confusing, I can't find the forgot password link.",
    "Great performance improvements in the latest update!",
    "Please add an export to CSV feature.",
    "The interface is clean but a bit hard to navigate on mobile.",
    "Billing is a nightmare, I got charged twice.",
    "Best app I've used for productivity this year.",
])

SENTIMENT_COLORS = {
    "positive": "#10b981",
    "negative": "#ef4444",
    "neutral": "#94a3b8",
}

# Page configuration
st.set_page_config(
    page_title="Voice of Customer",
    page_icon="📊",
    layout="wide",
)


def distribution_frame(result: AnalysisResult) -> pd.DataFrame:
    """Sentiment counts as a two-column frame for charting"""
    counts = result.sentiment_distribution.to_dict()
    return pd.DataFrame({
        "sentiment": list(counts.keys()),
        "count": list(counts.values()),
    })


def render_sentiment_chart(result: AnalysisResult):
    df = distribution_frame(result)
    df = df[df["count"] > 0]
    if df.empty:
        st.info("No feedback to chart.")
        return
    fig = px.pie(
        df,
        names="sentiment",
        values="count",
        hole=0.5,
        color="sentiment",
        color_discrete_map=SENTIMENT_COLORS,
    )
    st.plotly_chart(fig, use_container_width=True)


def render_themes(result: AnalysisResult):
    if not result.top_themes:
        st.info("No themes found.")
        return
    for theme in result.top_themes:
        icon = "🟢" if theme.sentiment > 0 else "🔴" if theme.sentiment < 0 else "⚪"
        with st.expander(f"{icon} {theme.name} · {theme.count} mentions · sentiment {theme.sentiment:.1f}"):
            for example in theme.examples:
                st.markdown(f"> {example}")


def main():
    """Main Streamlit app"""
    st.title("📊 Voice of Customer")
    st.caption("Transform messy feedback into actionable product strategy. "
               "Paste reviews, tweets, or support tickets below.")

    left, right = st.columns([5, 7])

    with left:
        raw_input = st.text_area(
            "Raw Feedback (one per line)",
            value=EXAMPLE_FEEDBACK,
            height=360,
        )
        lines = split_feedback_lines(raw_input)
        st.caption(f"{len(lines)} items")
        if st.button("Generate Insights", type="primary", disabled=not lines):
            st.session_state['result'] = analyze_feedback(lines)

    result = st.session_state.get('result')

    with right:
        if result is None:
            st.info("Run the analysis to see sentiment, themes and insights.")
            return

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Total Feedback", result.total_count)
        with col2:
            st.metric("Avg Sentiment", f"{result.average_sentiment:.2f}")
        with col3:
            st.metric("Negative", result.sentiment_distribution.negative)

        st.subheader("💡 Actionable Insights")
        for insight in result.actionable_insights:
            st.markdown(f"- {insight}")

        st.subheader("Sentiment Distribution")
        render_sentiment_chart(result)

        st.subheader("Top Themes")
        render_themes(result)

        st.download_button(
            "Download report (JSON)",
            data=result.to_json(),
            file_name="feedback_report.json",
            mime="application/json",
        )


if __name__ == "__main__":
    main()
