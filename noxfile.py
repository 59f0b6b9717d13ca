import typing

import nox

if typing.TYPE_CHECKING:
    from nox.sessions import Session

nox.options.default_venv_backend = "uv|virtualenv"
nox.options.sessions = ["tests"]

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]


@nox.session(python=PYTHON_VERSIONS)
def tests(session: "Session"):
    session.install("-e", ".[test]")
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS, tags=["coverage"])
def tests_with_coverage(session: "Session"):
    session.install("-e", ".[test]")
    session.env["COVERAGE_FILE"] = f".coverage.{session.python}"
    session.run(
        "pytest",
        "--cov=hatemp",
        "--cov-branch",
        "--cov-report=term-missing:skip-covered",
        "--cov-report=xml",
        *session.posargs,
    )
