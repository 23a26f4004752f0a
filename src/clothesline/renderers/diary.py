"""Session diary renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from clothesline.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Sequence

    from clothesline.schemas import DiaryEntry

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_diary_html(entries: Sequence[DiaryEntry]) -> str:
    """One row per entry, oldest first."""
    rows = [(e.created_at.strftime(TIMESTAMP_FORMAT), e.text) for e in entries]
    return render_template("diary.html.j2", rows=rows)
