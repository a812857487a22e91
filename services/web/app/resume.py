from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ResumeData(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    skills: list[str]


def load_resume() -> ResumeData:
    # Order is display order.
    return ResumeData(
        skills=[
            "JavaScript",
            "CSS/HTML",
            "React",
            "Vue",
            "Angular",
            "NodeJS",
            "Ruby",
            "PHP",
            "Perl",
            "Git",
            "Docker",
            "AWS",
            "Remix",
        ]
    )
