"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Sample review feedback and history payloads shared across modules
"""

from __future__ import annotations

from typing import Any

import pytest
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Sample Data
# =============================================================================

SAMPLE_FEEDBACK = """Overall this is a strong resume for a backend role.

Suggestions for improvement:
1. Quantify achievements with metrics
2. Move education below experience
3. Add a concise professional summary

Missing keywords:
- Python
- Docker
- CI/CD

Formatting or grammar issues:
• Inconsistent date formats
• Two spelling mistakes in the skills section

ATS Compatibility Score: 7/10
"""


# =============================================================================
# Common Test Fixtures
# =============================================================================


@pytest.fixture
def sample_feedback() -> str:
    """Feedback text with every section present.

    Returns:
        Multi-section feedback using numbered, bulleted and dotted lists.
    """
    return SAMPLE_FEEDBACK


@pytest.fixture
def history_payload() -> dict[str, Any]:
    """History API envelope with four records, newest first.

    Returns:
        Payload shaped like the ``/resume/history`` response.
    """
    return {
        "history": [
            {
                "_id": "r3",
                "fileName": "backend_cv.pdf",
                "jobRole": "Backend Engineer",
                "createdAt": "2026-04-04T12:00:00.000Z",
                "atsScore": 8,
                "aiFeedback": SAMPLE_FEEDBACK,
            },
            {
                "_id": "r2",
                "fileName": "frontend_cv.pdf",
                "jobRole": "UI Developer",
                "createdAt": "2026-03-03T12:00:00.000Z",
                "atsScore": 5.5,
                "aiFeedback": "Grammar Issues: Inconsistent tense usage throughout.",
            },
            {
                "_id": "r1",
                "fileName": "Data_Resume.docx",
                "jobRole": "Data Engineer",
                "createdAt": "2026-02-02T12:00:00.000Z",
                "atsScore": 3,
                "aiFeedback": "Looks like a solid resume overall.",
            },
            {
                "_id": "r0",
                "fileName": "untitled.pdf",
                "jobRole": "",
                "createdAt": "2026-01-01T12:00:00.000Z",
                "atsScore": None,
                "aiFeedback": None,
            },
        ]
    }
