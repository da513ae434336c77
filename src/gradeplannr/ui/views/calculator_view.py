from typing import Dict, Optional

import flet as ft

from gradeplannr.config.log_config import context
from gradeplannr.core.components import parse_score
from gradeplannr.core.engine import GradeEngine
from gradeplannr.services.catalog_service import CatalogService, CatalogServiceError
from gradeplannr.state.app_state import AppState
from gradeplannr.ui import formatting

COLORS: Dict[str, str] = {
    formatting.SUCCESS: ft.Colors.GREEN_400,
    formatting.WARNING: ft.Colors.AMBER_400,
    formatting.DANGER: ft.Colors.RED_400,
}

PRIORITY_ICONS: Dict[str, str] = {
    "exclamation-circle": ft.Icons.ERROR_OUTLINE,
    "exclamation-triangle": ft.Icons.WARNING_AMBER,
    "info-circle": ft.Icons.INFO_OUTLINE,
}


def _color(key: Optional[str]) -> Optional[str]:
    return COLORS.get(key) if key else None


def _empty_state(icon: str, message: str) -> ft.Container:
    return ft.Container(
        padding=16,
        content=ft.Row(controls=[ft.Icon(icon), ft.Text(message)]),
    )


def build_calculator_view(
    page: ft.Page,
    app_state: AppState,
    engine: GradeEngine,
    catalog: CatalogService,
) -> ft.View:
    state = app_state.calculator

    course = ft.Dropdown(width=420, label="Course")
    professor = ft.Dropdown(width=420, label="Professor", disabled=True)
    target = ft.Dropdown(
        width=200,
        label="Target grade",
        options=[
            ft.dropdown.Option(value, label)
            for value, label in formatting.target_grade_options(state.target_grade, engine.scale)
        ],
        value=f"{state.target_grade:g}",
    )
    status = ft.Text(color=ft.Colors.RED_400)

    component_rows = ft.Column(spacing=10)
    current_text = ft.Text()
    target_text = ft.Text()
    needed_text = ft.Text()
    final_text = ft.Text()
    study_plan = ft.Column(spacing=8)

    def set_status(message: str) -> None:
        status.value = message

    def render_components() -> None:
        component_rows.controls.clear()

        if not state.has_components:
            component_rows.controls.append(_empty_state(ft.Icons.MENU_BOOK, formatting.NO_COMPONENTS_MESSAGE))
            return

        for index, component in enumerate(state.components):
            score_field = ft.TextField(
                label="Your Score (%)",
                hint_text="Enter score",
                width=180,
                keyboard_type=ft.KeyboardType.NUMBER,
                data=index,
                on_change=on_score_change,
            )
            target_field = ft.TextField(
                label="Target Score (%)",
                hint_text="Target",
                width=180,
                keyboard_type=ft.KeyboardType.NUMBER,
                data=index,
                on_change=on_target_change,
            )
            component_rows.controls.append(
                ft.Card(
                    content=ft.Container(
                        padding=12,
                        content=ft.Column(
                            controls=[
                                ft.Row(
                                    controls=[
                                        ft.Text(component.name, weight=ft.FontWeight.BOLD),
                                        ft.Text(f"{component.weight:g}% of final grade"),
                                    ],
                                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                                ),
                                ft.Row(controls=[score_field, target_field]),
                            ]
                        ),
                    )
                )
            )

    def render_study_plan(items, target_grade: float) -> None:
        study_plan.controls.clear()
        if not state.has_components:
            study_plan.controls.append(_empty_state(ft.Icons.LIGHTBULB_OUTLINE, formatting.NO_STUDY_PLAN_MESSAGE))
            return
        if not items:
            study_plan.controls.append(_empty_state(ft.Icons.CHECK_CIRCLE_OUTLINE, formatting.ALL_COMPLETED_MESSAGE))
            return

        for index, item in enumerate(items):
            study_plan.controls.append(
                ft.ListTile(
                    leading=ft.Icon(PRIORITY_ICONS[formatting.priority_icon(index)]),
                    title=ft.Text(item.name, weight=ft.FontWeight.BOLD),
                    subtitle=ft.Column(
                        spacing=2,
                        controls=[
                            ft.Text(formatting.describe_weight(item)),
                            ft.Text(formatting.describe_recommendation(item, target_grade)),
                        ],
                    ),
                    trailing=ft.Text(formatting.priority_label(index)),
                )
            )

    def update_results() -> None:
        if not state.professor_id or not state.has_components:
            current_text.value = ""
            target_text.value = ""
            needed_text.value = ""
            final_text.value = ""
            render_study_plan([], state.target_grade)
            return

        target_grade = state.target_grade
        summary = engine.summarize(
            state.components,
            target_grade,
            log_context=context(state.course_id, state.professor_id),
        )

        current_text.value = formatting.describe_current(summary.current)
        current_text.color = _color(formatting.grade_color(summary.current.percentage)) if summary.current.is_available else None
        target_text.value = formatting.describe_target(target_grade, engine.scale)
        needed_text.value = formatting.describe_required(summary.required, engine.scale)
        needed_text.color = _color(formatting.required_color(summary.required))
        final_text.value = formatting.describe_final(summary.final, summary.current)

        render_study_plan(summary.study_plan, target_grade)

    def refresh() -> None:
        update_results()
        page.update()

    def on_score_change(e: ft.ControlEvent) -> None:
        index = e.control.data
        stored = state.set_score(index, e.control.value)
        if stored is not None and parse_score(e.control.value) != stored:
            e.control.value = f"{stored:g}"
        refresh()

    def on_target_change(e: ft.ControlEvent) -> None:
        index = e.control.data
        stored = state.set_target(index, e.control.value)
        if stored is not None and parse_score(e.control.value) != stored:
            e.control.value = f"{stored:g}"
        refresh()

    def on_target_grade_change(_) -> None:
        state.set_target_grade(target.value)
        refresh()

    def on_professor_change(_) -> None:
        set_status("")
        if not professor.value or not state.course_id:
            state.select_professor(None)
        else:
            try:
                state.select_professor(professor.value, catalog.build_components(state.course_id, professor.value))
            except CatalogServiceError as exc:
                state.select_professor(None)
                set_status(str(exc))
        render_components()
        refresh()

    def on_course_change(_) -> None:
        set_status("")
        state.select_course(course.value)
        professor.value = None
        professor.options = []
        professor.disabled = True

        if state.course_id:
            try:
                professors = catalog.list_professors(state.course_id)
            except CatalogServiceError as exc:
                set_status(str(exc))
                professors = []
            professor.options = [ft.dropdown.Option(p.id, p.name) for p in professors]
            professor.disabled = not professors
            if len(professors) == 1:
                professor.value = professors[0].id
                on_professor_change(None)
                return

        render_components()
        refresh()

    course.options = [ft.dropdown.Option(c.id, c.name) for c in catalog.list_courses()]
    course.on_change = on_course_change
    professor.on_change = on_professor_change
    target.on_change = on_target_grade_change

    render_components()
    update_results()

    return ft.View(
        route="/",
        controls=[
            ft.AppBar(title=ft.Text("GradePlannr - Grade Calculator")),
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    controls=[
                        ft.Text("Course", size=22, weight=ft.FontWeight.BOLD),
                        course,
                        professor,
                        target,
                        status,
                        ft.Divider(),
                        ft.Text("Grade Components", size=20, weight=ft.FontWeight.BOLD),
                        component_rows,
                        ft.Button("Calculate", on_click=lambda _: refresh()),
                        ft.Divider(),
                        ft.Text("Results", size=20, weight=ft.FontWeight.BOLD),
                        ft.Row(controls=[ft.Text("Current grade:", width=160), current_text]),
                        ft.Row(controls=[ft.Text("Target grade:", width=160), target_text]),
                        ft.Row(controls=[ft.Text("Needed on the rest:", width=160), needed_text]),
                        final_text,
                        ft.Divider(),
                        ft.Text("Study Plan", size=20, weight=ft.FontWeight.BOLD),
                        study_plan,
                    ],
                ),
            ),
        ],
    )
