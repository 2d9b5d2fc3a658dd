"""ABOUTME: Streamlit type calculator for Pokemon typings.
ABOUTME: Shows defensive sections, offensive matchups and counters for a selected typing."""

import streamlit as st

from typematchup.chart.types import TYPES, PokemonType
from typematchup.config import DisplayConfig, load_display_config
from typematchup.effectiveness.cache import EffectivenessCache
from typematchup.effectiveness.frames import type_chart_frame
from typematchup.effectiveness.matchups import calculate_offensive_coverage, format_multiplier, recommend_counters
from typematchup.settings import settings


@st.cache_resource
def get_effectiveness_cache() -> EffectivenessCache:
    """One effectiveness cache shared by all sessions of this server."""
    return EffectivenessCache(max_entries=settings.CACHE_MAX_ENTRIES)


@st.cache_resource
def get_display_config() -> DisplayConfig:
    """Display labels loaded once from display.yml."""
    return load_display_config()


def _type_names(types: tuple[PokemonType, ...]) -> str:
    return ", ".join(t.value for t in types) if types else "None"


st.set_page_config(page_title="Type Calculator", layout="wide")
st.title("Type Calculator")
st.caption("Pick one or two types to see weaknesses, resistances, immunities and counters.")

type_names = [t.value for t in TYPES]
col1, col2 = st.columns(2)
with col1:
    primary = st.selectbox("Primary type", options=type_names, index=None, key="primary_type")
with col2:
    secondary = st.selectbox(
        "Secondary type",
        options=[name for name in type_names if name != primary],
        index=None,
        key="secondary_type",
        disabled=primary is None,
    )

if primary is not None:
    selected = [primary] if secondary is None else [primary, secondary]
    display = get_display_config()
    result = get_effectiveness_cache().get(selected)

    st.subheader("Damage taken")
    for category, section in display.ordered_sections():
        entries = result.groups[category]
        if not entries:
            continue
        labels = ", ".join(
            f"{e.attacking_type.value} ({format_multiplier(e.multiplier, display.unicode_fractions)})" for e in entries
        )
        st.markdown(f"**{section.title}:** {labels}")

    coverage = calculate_offensive_coverage(selected)
    st.subheader("Damage dealt")
    st.markdown(f"**Super effective against:** {_type_names(coverage.super_effective)}")
    st.markdown(f"**Not very effective against:** {_type_names(coverage.not_very_effective)}")
    st.markdown(f"**No effect on:** {_type_names(coverage.no_effect)}")

    recommendation = recommend_counters(selected)
    st.subheader("Recommended counters")
    st.markdown(f"**Immune to its attacks:** {_type_names(recommendation.immune)}")
    st.markdown(f"**Safe picks:** {_type_names(recommendation.recommended)}")

with st.expander("Full type chart"):
    st.dataframe(type_chart_frame(), hide_index=True)
