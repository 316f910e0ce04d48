import io

import docx
import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from intelliforms.config.settings import Settings


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a Word document with two paragraphs and a small table."""
    document = docx.Document()
    document.add_paragraph("Customer registration")
    document.add_paragraph("Full name and email address are required.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Phone"
    table.rows[0].cells[1].text = "Optional"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def sample_png_bytes() -> bytes:
    """Generate a small blank PNG image."""
    buf = io.BytesIO()
    Image.new("RGB", (32, 32), color="white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    monkeypatch.delenv("API_KEY", raising=False)
    return Settings(
        _env_file=None,
        api_key="secret-key",
        bucket_name="uploads",
        pubsub_topic="form-jobs",
        gcp_project_id="test-project",
        generation_provider="example",
        storage_backend="local",
        queue_backend="inline",
    )


@pytest.fixture()
def docx_with_image_bytes(sample_png_bytes: bytes) -> bytes:
    """Generate a Word document with one paragraph and one embedded picture."""
    document = docx.Document()
    document.add_paragraph("Attach a recent photo")
    document.add_picture(io.BytesIO(sample_png_bytes))
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()
