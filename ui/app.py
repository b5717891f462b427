"""
Vibe Compatibility UI

A Streamlit application for computing the compatibility score between
two profiles from their 15 personality dimensions.

Design: soft neutral palette, large hero score, category bars and the
dimensions that match and clash the most.

Run with: streamlit run ui/app.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pandas as pd
import streamlit as st

from vibe_scoring import Profile
from vibe_scoring.configs import ScoringConfig
from vibe_scoring.explain import CATEGORIES, category_of, compatibility_level
from vibe_scoring.inference import create_calculator

# =============================================================================
# CONSTANTS
# =============================================================================

DIMENSION_LABELS = {
    "positivity": ("Positivity", "How upbeat the posts are"),
    "empathy": ("Empathy", "Warmth and care toward others"),
    "engagement": ("Engagement", "How much they reply and interact"),
    "debate": ("Debate", "Appetite for arguments (opposites can work)"),
    "shitpost": ("Shitposting", "Low-effort absurdist posting"),
    "meme": ("Memes", "How meme-driven the feed is"),
    "intellectual": ("Intellectual", "Depth of discussion"),
    "political": ("Political", "How much politics shows up"),
    "personalSharing": ("Personal sharing", "Sharing personal life (sharer + listener works)"),
    "inspirationalQuotes": ("Inspirational quotes", "Motivational content"),
    "extroversion": ("Extroversion", "Social energy (opposites can balance)"),
    "authenticity": ("Authenticity", "How genuine the voice feels"),
    "optimism": ("Optimism", "Outlook on things"),
    "humor": ("Humor", "How funny the feed is"),
    "aiGenerated": ("AI-generated", "Signs of generated content"),
}

COLORS = {
    "background": "#FAFAFA",
    "card_bg": "#FFFFFF",
    "text_primary": "#2D3748",
    "text_secondary": "#718096",
    "accent": "#319795",
    "accent_light": "#E6FFFA",
    "border": "#E2E8F0",
    "success": "#48BB78",
    "warning": "#ED8936",
    "error": "#F56565",
}

LEVEL_COLORS = {
    "perfect": COLORS["success"],
    "high": COLORS["accent"],
    "medium": COLORS["warning"],
    "low": COLORS["error"],
}

# =============================================================================
# CUSTOM CSS
# =============================================================================

def inject_custom_css():
    """Inject custom CSS."""
    st.markdown(f"""
    <style>
        .stApp {{
            background-color: {COLORS['background']};
        }}

        h1, h2, h3 {{
            color: {COLORS['text_primary']} !important;
            font-weight: 600 !important;
        }}

        .card-header {{
            color: {COLORS['text_primary']};
            font-size: 1.1rem;
            font-weight: 600;
            margin-bottom: 1rem;
            padding-bottom: 0.75rem;
            border-bottom: 1px solid {COLORS['border']};
        }}

        .hero-score-container {{
            text-align: center;
            padding: 2.5rem 1rem;
            background: {COLORS['card_bg']};
            border: 1px solid {COLORS['border']};
            border-radius: 16px;
            margin: 1.5rem 0;
        }}

        .hero-score {{
            font-size: 4.5rem;
            font-weight: 700;
            line-height: 1;
            margin-bottom: 0.5rem;
        }}

        .hero-score-label {{
            font-size: 1rem;
            color: {COLORS['text_secondary']};
        }}

        .category-row {{
            display: flex;
            align-items: center;
            margin: 0.4rem 0;
        }}

        .category-name {{
            width: 9rem;
            color: {COLORS['text_primary']};
            font-size: 0.9rem;
        }}

        .category-bar {{
            flex: 1;
            height: 8px;
            background: {COLORS['border']};
            border-radius: 4px;
            overflow: hidden;
        }}

        .category-fill {{
            height: 100%;
            background: {COLORS['accent']};
        }}

        .category-value {{
            width: 3rem;
            text-align: right;
            color: {COLORS['text_secondary']};
            font-size: 0.9rem;
        }}
    </style>
    """, unsafe_allow_html=True)


# =============================================================================
# COMPONENT FUNCTIONS
# =============================================================================

@st.cache_resource
def load_calculator(amplification_power: float):
    """Create and cache a calculator per amplification power."""
    config = ScoringConfig.from_env()
    config.amplification_power = amplification_power
    return create_calculator(config)


def render_header():
    """Render the page header."""
    st.markdown("""
    <div style="text-align: center; margin-bottom: 2rem;">
        <h1 style="font-size: 2.2rem; margin-bottom: 0.5rem;">Vibe Check</h1>
        <p style="font-size: 1.1rem; color: #718096; max-width: 600px; margin: 0 auto;">
            Compatibility of two profiles across 15 personality dimensions
        </p>
    </div>
    """, unsafe_allow_html=True)


def render_profile_section(label: str, key_prefix: str) -> Profile:
    """Render sliders for one profile; unchecked dimensions are unknown."""
    st.markdown(f'<div class="card-header">{label}</div>', unsafe_allow_html=True)
    profile_id = st.text_input("Name", value=label, key=f"{key_prefix}_id")

    dimensions = {}
    for category, members in CATEGORIES.items():
        st.caption(category.title())
        for dim in members:
            name, tooltip = DIMENSION_LABELS[dim]
            col1, col2 = st.columns([1, 4])
            with col1:
                known = st.checkbox("known", value=True, key=f"{key_prefix}_{dim}_known",
                                    label_visibility="collapsed")
            with col2:
                value = st.slider(
                    label=name,
                    min_value=0.0,
                    max_value=1.0,
                    value=0.5,
                    step=0.05,
                    key=f"{key_prefix}_{dim}",
                    help=tooltip,
                    disabled=not known,
                )
            dimensions[dim] = value if known else None

    return Profile(profile_id=profile_id or label, dimensions=dimensions)


def render_results(result):
    """Render the hero score, category bars and dimension details."""
    level = compatibility_level(result.score)
    color = LEVEL_COLORS[level]

    st.markdown(f"""
    <div class="hero-score-container">
        <div class="hero-score-label">Compatibility</div>
        <div class="hero-score" style="color: {color};">{result.score}</div>
        <div class="hero-score-label">{result.label}</div>
    </div>
    """, unsafe_allow_html=True)

    if not result.breakdown:
        st.info("The two profiles share no known dimensions; showing the neutral score.")
        return

    col1, col2 = st.columns(2)
    with col1:
        st.markdown('<div class="card-header">Categories</div>', unsafe_allow_html=True)
        for category, value in result.category_scores.to_dict().items():
            st.markdown(f"""
            <div class="category-row">
                <div class="category-name">{category.title()}</div>
                <div class="category-bar"><div class="category-fill" style="width: {value}%"></div></div>
                <div class="category-value">{value}</div>
            </div>
            """, unsafe_allow_html=True)

    with col2:
        st.markdown('<div class="card-header">Highlights</div>', unsafe_allow_html=True)
        st.markdown("**Best matches:** " + ", ".join(
            DIMENSION_LABELS[d][0] for d in result.top_matches))
        st.markdown("**Biggest clashes:** " + ", ".join(
            DIMENSION_LABELS[d][0] for d in result.top_clashes))

    with st.expander("View dimension breakdown"):
        df = pd.DataFrame([c.to_dict() for c in result.breakdown])
        df["category"] = df["dimension"].map(category_of)
        df["dimension"] = df["dimension"].map(lambda d: DIMENSION_LABELS[d][0])
        st.dataframe(
            df[["dimension", "category", "value1", "value2", "difference", "score", "weight"]],
            use_container_width=True,
            hide_index=True,
        )
        st.caption(f"Raw score {result.raw_score:.4f} - aggregation strategy: {result.strategy}")


# =============================================================================
# MAIN APPLICATION
# =============================================================================

def main():
    """Main application entry point."""
    st.set_page_config(
        page_title="Vibe Check",
        page_icon="",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    inject_custom_css()
    render_header()

    with st.sidebar:
        amplification_power = st.slider(
            "Amplification power",
            min_value=1.0,
            max_value=5.0,
            value=ScoringConfig.from_env().amplification_power,
            step=0.25,
            help="1 = gentle spread, 2.5 = strong, 3.5+ = extreme",
        )

    calculator = load_calculator(amplification_power)

    col_a, col_spacer, col_b = st.columns([1, 0.05, 1])
    with col_a:
        profile_a = render_profile_section("Profile A", "a")
    with col_b:
        profile_b = render_profile_section("Profile B", "b")

    col1, col2, col3 = st.columns([1, 1, 1])
    with col2:
        compute_clicked = st.button(
            "Check the vibe",
            type="primary",
            use_container_width=True,
        )

    if compute_clicked:
        result = calculator.calculate_score(profile_a, profile_b)
        render_results(result)


if __name__ == "__main__":
    main()
