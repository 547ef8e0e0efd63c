import logging
from functools import wraps
from typing import Callable

from dotenv import load_dotenv

from flask import Flask, abort, redirect, render_template, request, url_for
from jinja2 import TemplateError

load_dotenv()

from constants import LOG_LEVEL
from config import WikiConfig
from autowiki import TEMPLATE_DIR
from autowiki.errors import InvalidTitleError, PageSaveError
from autowiki.models import NeedsEdit, SaveFailed, is_valid_title
from autowiki.services import WikiServices, build_services

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)

_PLAIN_TEXT = {"Content-Type": "text/plain; charset=utf-8"}


def _titled(handler: Callable[[str], object]) -> Callable[[str], object]:
    """404 unless the title is plain alphanumerics."""

    @wraps(handler)
    def wrapper(title: str):
        if not is_valid_title(title):
            logger.info("Rejected title %r on %s", title, request.path)
            abort(404)
        return handler(title)

    return wrapper


def create_app(services: WikiServices | None = None, *, template_folder: str | None = None) -> Flask:
    """Build the Flask app. Services are created from the environment unless injected."""
    if services is None:
        services = build_services(WikiConfig.from_env())
    pages = services.pages

    app = Flask(__name__, template_folder=template_folder or str(TEMPLATE_DIR))

    @app.route("/view/<title>", methods=["GET"])
    @_titled
    def view(title: str):
        """Render a page, generating a definition the first time it is viewed."""
        logger.info("View requested: %s", title)
        result = pages.view(title)
        if isinstance(result, NeedsEdit):
            logger.info("Redirecting %s to edit (%s)", title, type(result.cause).__name__)
            return redirect(url_for("edit", title=title))
        if isinstance(result, SaveFailed):
            logger.info("Generated page %s could not be saved: %s", title, result.error)
            return result.error, 500, _PLAIN_TEXT
        logger.debug("Rendering %s source=%s", title, result.source)
        return render_template("view.html", page=result.page)

    @app.route("/edit/<title>", methods=["GET"])
    @_titled
    def edit(title: str):
        logger.info("Edit requested: %s", title)
        page = pages.edit(title)
        return render_template("edit.html", page=page)

    @app.route("/save/<title>", methods=["POST"])
    @_titled
    def save(title: str):
        logger.info("Save requested: %s", title)
        body = request.form.get("body", "")
        try:
            pages.save(title, body)
        except PageSaveError as e:
            logger.info("Save failed for %s, returning 500", title)
            return str(e), 500, _PLAIN_TEXT
        return redirect(url_for("view", title=title))

    @app.errorhandler(InvalidTitleError)
    def invalid_title(e: InvalidTitleError):
        logger.info("Invalid title at storage boundary: %r", e.title)
        return "Not Found", 404, _PLAIN_TEXT

    @app.errorhandler(TemplateError)
    def template_error(e: TemplateError):
        logger.exception("Template rendering failed.")
        return str(e), 500, _PLAIN_TEXT

    return app


def main() -> int:
    config = WikiConfig.from_env()
    app = create_app(build_services(config))
    logger.info("Starting wiki on %s:%d pages_dir=%s", config.host, config.port, config.pages_dir)
    try:
        app.run(host=config.host, port=config.port)
    except (OSError, SystemExit) as e:
        # werkzeug reports a failed bind itself and exits with status 1.
        if isinstance(e, SystemExit) and not e.code:
            raise
        logger.critical("Could not bind %s:%d: %s", config.host, config.port, e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
