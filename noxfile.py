from contextlib import contextmanager
from typing import Generator

import github_action_utils as gha
import nox

nox.options.default_venv_backend = "uv"
nox.options.error_on_external_run = True


@contextmanager
def group(title: str) -> Generator[None, None, None]:
    try:
        gha.start_group(title)
        yield
    except Exception as e:
        gha.end_group()
        gha.error(f"{title} failed with {e}")
        raise
    else:
        gha.end_group()


def install_dev(session: nox.Session) -> None:
    session.install("-e", ".[dev,devtools]")


@nox.session(py=["3.10", "3.13"])
def tests(session: nox.Session) -> None:
    with group(f"{session.name} - Install"):
        install_dev(session)
    with group(f"{session.name} Test"):
        session.run(
            "pytest",
            "--junitxml=results.xml",
            "--cov",
            "--cov-report",
            "xml:coverage.xml",
            "--verbose",
            "-rs",
        )


@nox.session(py=["3.13"])
def mypy(session: nox.Session) -> None:
    install_dev(session)
    session.run("mypy", "chainid/")
