import logging
import os
from functools import partial

import gradio as gr

from json_xlsx_converter.handlers import (
    convert_handler,
    load_file_handler,
    selection_change_handler,
)
from json_xlsx_converter.settings import ConverterSettings

settings = ConverterSettings.from_env()

# --- UI Definition ---
with gr.Blocks(title="JSON to XLSX Converter") as demo:
    gr.Markdown("# JSON to XLSX Converter")
    gr.Markdown("Upload a JSON array of objects, pick the columns to keep, and download a spreadsheet.")

    # State
    dataset_state = gr.State()

    with gr.Row():
        # Left Panel: Input & Fields
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"], type="filepath")
            status_msg = gr.Textbox(label="Status", interactive=False)

            gr.Markdown("### 2. Select Fields")
            field_checkboxes = gr.CheckboxGroup(label="Fields", choices=[], value=[], visible=False)

            gr.Markdown("### 3. Export")
            convert_btn = gr.Button("Convert to XLSX", variant="primary")
            download_output = gr.File(label="Download Result")

        # Right Panel: Preview
        with gr.Column(scale=2):
            gr.Markdown("### Preview")
            preview_table = gr.Dataframe(label="Preview", interactive=False, wrap=True, visible=False)

    file_input.change(
        fn=partial(load_file_handler, settings=settings),
        inputs=[file_input],
        outputs=[dataset_state, field_checkboxes, preview_table, status_msg],
    )

    field_checkboxes.input(
        fn=partial(selection_change_handler, settings=settings),
        inputs=[dataset_state, field_checkboxes],
        outputs=[preview_table],
    )

    convert_btn.click(
        fn=partial(convert_handler, settings=settings),
        inputs=[dataset_state, field_checkboxes],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("JSON_XLSX_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    demo.launch()
