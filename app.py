import streamlit as st
from typing import List

from identicon.image import ImageDescriptor
from identicon.pipeline import build
from identicon.renderer.draw import IdenticonRenderer
from identicon.types import GRID_SIZE

st.set_page_config(layout="centered", page_title="Identicon")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
    </style>
""",
    unsafe_allow_html=True,
)


def grid_to_ascii(image: ImageDescriptor) -> str:
    """5x5 board with ``#`` for drawn cells and ``.`` for empty ones."""
    assert image.grid is not None
    drawn = {index for _, index in image.grid}
    rows: List[str] = []
    for row in range(GRID_SIZE):
        rows.append(
            "".join(
                "#" if row * GRID_SIZE + col in drawn else "." for col in range(GRID_SIZE)
            )
        )
    return "\n".join(rows)


renderer = IdenticonRenderer()

st.title("Identicon")
text = st.text_input("Input", value="Chris")

image = build(text)
st.image(renderer.render_array(image), caption=text or "(empty string)")

with st.expander("Details"):
    st.write(f"Seed: `{list(image.seed)}`")
    st.write(f"Colour: `rgb{image.rgb}`")
    st.code(grid_to_ascii(image), language=None)

if text:
    st.download_button(
        "Download PNG",
        data=renderer.render_png(image),
        file_name=f"{text}.png",
        mime="image/png",
    )
