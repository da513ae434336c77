import logging

import flet as ft

from gradeplannr.config.log_config import configure_logging
from gradeplannr.config.settings import settings
from gradeplannr.core.engine import GradeEngine
from gradeplannr.services.catalog_service import CatalogService
from gradeplannr.state.app_state import AppState
from gradeplannr.ui.views.calculator_view import build_calculator_view

logger = logging.getLogger(__name__)


def main(page: ft.Page) -> None:
    page.title = settings.app_title
    page.scroll = ft.ScrollMode.AUTO

    app_state = AppState()
    engine = GradeEngine(study_plan_size=settings.study_plan_size)
    catalog = CatalogService.from_settings()

    page.views.clear()
    page.views.append(build_calculator_view(page, app_state, engine, catalog))
    page.update()


def run() -> None:
    configure_logging(settings.log_level)
    logger.info("Starting %s (web=%s, port=%s)", settings.app_title, settings.web_mode, settings.port)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
