import io
import re
import zipfile

import requests
import streamlit as st
import streamlit.components.v1 as components

from figma2html.document import inline_stylesheet
from figma2html.errors import Figma2HtmlError
from figma2html.figma_client import FigmaClient
from figma2html.generate import INDEX_FILE, STYLES_FILE, convert_frame
from figma2html.parser import find_node_by_id, get_frame_size, list_top_frames, parse_file_key
from figma2html.render import render_tree

st.set_page_config(page_title="Figma to HTML", layout="wide")

st.title("Figma to HTML")

# sidebar
with st.sidebar:
    st.header("Configuration")
    token = st.text_input("Figma Personal Access Token", type="password")
    file_url = st.text_input("Figma File URL")

    st.info("Upload your local .fig file to Figma Drafts to get a URL.")

    load_btn = st.button("Load File")


@st.cache_data(ttl=600)
def get_file_data(token, file_key):
    return FigmaClient(token).get_file(file_key)


@st.cache_data(ttl=600)
def get_rendered_image_url(token, file_key, node_id):
    data = FigmaClient(token).get_images(file_key, [node_id])
    return (data.get("images") or {}).get(node_id)


def build_zip(page, stylesheet):
    zip_buffer = io.BytesIO()
    with zipfile.ZipFile(zip_buffer, "w") as zf:
        zf.writestr(INDEX_FILE, page)
        zf.writestr(STYLES_FILE, stylesheet)
    return zip_buffer.getvalue()


if load_btn and token and file_url:
    file_key = parse_file_key(file_url)
    if not file_key:
        st.error(f"Could not parse File ID from URL: {file_url}")
    else:
        with st.spinner(f"Fetching file data for ID: {file_key}..."):
            try:
                data = get_file_data(token, file_key)
                if data and "document" in data:
                    st.session_state["file_data"] = data
                    st.session_state["file_key"] = file_key
                    st.success("File loaded successfully!")
                else:
                    st.error("API returned data but no document found. Check permissions.")
            except (Figma2HtmlError, requests.RequestException) as e:
                st.error(f"API Error: {e}")
                st.info("Check your **Personal Access Token** and **File URL**.")

if "file_data" in st.session_state:
    data = st.session_state["file_data"]
    file_key = st.session_state["file_key"]
    frames = list_top_frames(data)

    if not frames:
        st.info("No top-level frames found.")
        st.stop()

    labels = [f"{f['page']} / {f['name']}" for f in frames]
    choice = st.selectbox("Frame", range(len(frames)), format_func=lambda i: labels[i])
    frame = frames[choice]

    page, stylesheet = convert_frame(frame["node"])
    width, height = get_frame_size(frame["node"])

    tab1, tab2, tab3, tab4 = st.tabs(["Preview", "Code", "Inspector", "Rendered"])

    with tab1:
        st.header("HTML Preview")
        components.html(inline_stylesheet(page, stylesheet), height=min(height, 1200) + 40, scrolling=True)
        st.download_button(
            label="Download .zip",
            data=build_zip(page, stylesheet),
            file_name=f"{re.sub(r'[^a-zA-Z0-9_-]', '', frame['name']) or 'frame'}.zip",
            mime="application/zip",
        )

    with tab2:
        col_a, col_b = st.columns(2)
        with col_a:
            st.subheader(INDEX_FILE)
            st.code(page, language="html")
        with col_b:
            st.subheader(STYLES_FILE)
            st.code(stylesheet, language="css")

    with tab3:
        st.header("Node Inspector")
        st.write("Enter a Node ID to inspect its properties and generated CSS.")
        node_id_input = st.text_input("Node ID (e.g. 1:123)")

        if node_id_input:
            found_node = find_node_by_id(frame["node"], node_id_input.replace("-", ":"))
            if found_node:
                st.success(f"Found Node: {found_node.get('name')} ({found_node.get('type')})")
                col_a, col_b = st.columns(2)
                with col_a:
                    st.subheader("Raw Properties")
                    st.json(found_node, expanded=False)
                with col_b:
                    st.subheader("Generated CSS")
                    # rendered as its own root, so positions are not relative to its real parent
                    st.code(render_tree(found_node).stylesheet, language="css")
            else:
                st.error("Node not found in this frame.")

    with tab4:
        st.header("Figma Render")
        st.caption(f"{width} x {height}")
        if st.button("Fetch rendered PNG"):
            try:
                img_url = get_rendered_image_url(token, file_key, frame["id"])
            except (Figma2HtmlError, requests.RequestException) as e:
                st.error(f"Could not fetch render: {e}")
            else:
                if img_url:
                    st.image(img_url)
                    st.markdown(f"[Download]({img_url})")
                else:
                    st.warning("Figma returned no image for this frame.")
