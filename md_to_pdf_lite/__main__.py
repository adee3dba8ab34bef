from md_to_pdf_lite.cli import app

app(prog_name="md-to-pdf-lite")
