"""NiceGUI login page."""

from fastapi.responses import RedirectResponse
from nicegui import ui

from docchat.client.auth_backend import HttpAuthBackend
from docchat.models import AuthStatus
from docchat.session import get_session_store
from docchat.state.auth import AuthController
from docchat.ui.theme import CUSTOM_CSS


@ui.page("/login")
def login_page() -> RedirectResponse | None:
    """Email/password login page."""
    controller = AuthController(HttpAuthBackend(), get_session_store())
    if controller.is_logged_in:
        return RedirectResponse("/")

    ui.add_head_html(CUSTOM_CSS)

    email_input: ui.input
    password_input: ui.input
    login_btn: ui.button

    def on_state(auth: AuthController) -> None:
        state = auth.state
        if state.status == AuthStatus.LOADING:
            login_btn.disable()
        elif state.status == AuthStatus.SUCCESS:
            ui.navigate.to("/")
        elif state.status == AuthStatus.ERROR:
            login_btn.enable()
            ui.notify(state.message, type="negative")
        else:
            login_btn.enable()

    async def attempt_login() -> None:
        if controller.state.status == AuthStatus.LOADING:
            return
        await controller.login(email_input.value or "", password_input.value or "")

    controller.subscribe(on_state)

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8 flex items-center"),
        ui.column().classes("w-full max-w-sm mx-auto app-container"),
    ):
        with ui.row().classes("w-full header px-5 py-4 items-center gap-3"):
            ui.icon("smart_toy").classes("text-white text-3xl")
            ui.label("Document Chat").classes("text-lg font-semibold text-white")

        with ui.column().classes("w-full p-5 gap-3"):
            email_input = ui.input("Email").props("outlined dense").classes("w-full")
            password_input = (
                ui.input("Password", password=True, password_toggle_button=True)
                .props("outlined dense")
                .classes("w-full")
                .on("keydown.enter", attempt_login)
            )
            login_btn = (
                ui.button("Log in", on_click=attempt_login)
                .props("unelevated")
                .classes("w-full send-btn text-white")
            )
