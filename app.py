import streamlit as st
from pyrsistent import thaw

from identicon_generator.config import DEFAULT_CONFIG, IdenticonConfig, parse_color
from identicon_generator.errors import InputEncodingError
from identicon_generator.pipeline import generate_state
from identicon_generator.renderer.raster import RasterRenderer
from identicon_generator.utils.grid import build_grid, grid_rows
from identicon_generator.writer import ENCODER_REGISTRY, encode_image

st.set_page_config(layout="wide", page_title="Identicon Generator")

with st.sidebar:
    st.subheader("Output")
    image_format: str = st.selectbox(
        "Format",
        sorted(ENCODER_REGISTRY),
        index=sorted(ENCODER_REGISTRY).index(DEFAULT_CONFIG.image_format),
    )
    transparent: bool = st.checkbox("Transparent background", value=True)
    background_hex: str = st.color_picker(
        "Background", "#FFFFFF", disabled=transparent
    )

config = IdenticonConfig(
    background=DEFAULT_CONFIG.background if transparent else parse_color(background_hex),
    image_format=image_format,
)

text: str = st.text_input("Input", value="Hayden")

try:
    state = generate_state(text)
except InputEncodingError as exc:
    st.error(str(exc))
    st.stop()

image = RasterRenderer(background=config.background).render(state)

tab_image, tab_state = st.tabs(["Identicon", "State"])

with tab_image:
    left_col, right_col = st.columns([1, 1])
    with left_col:
        st.image(image, width=250)
        st.download_button(
            "Download",
            data=encode_image(image, config.image_format),
            file_name=f"{text}.{config.extension}",
        )
    with right_col:
        assert state.color is not None
        r, g, b = state.color.as_tuple()
        st.info(f"**Color:** ({r}, {g}, {b})  `#{r:02x}{g:02x}{b:02x}`")
        st.info(f"**Filled cells:** {len(state.grid)} / 25")
        st.markdown("**Mirrored grid**")
        st.table(grid_rows(build_grid(state.hex)))

with tab_state:
    st.json(thaw(state.description), expanded=1)
