from __future__ import annotations


def test_skills_join_in_declaration_order() -> None:
    from services.web.app.resume import load_resume

    assert ", ".join(load_resume().skills) == (
        "JavaScript, CSS/HTML, React, Vue, Angular, NodeJS, Ruby, PHP, Perl, Git, Docker, AWS, Remix"
    )


def test_each_call_builds_a_fresh_list() -> None:
    from services.web.app.resume import load_resume

    first = load_resume()
    first.skills.append("COBOL")

    assert "COBOL" not in load_resume().skills
