"""NiceGUI chat page with a document-selection drawer."""

from datetime import datetime

from fastapi.responses import RedirectResponse
from nicegui import ui
from nicegui.events import ValueChangeEventArguments

from docchat.client.api_client import ApiClient
from docchat.client.auth_backend import HttpAuthBackend
from docchat.config import get_client_config
from docchat.formatting import escape_html, lines_to_html
from docchat.models import ChatMessage, RelatedDocument
from docchat.session import get_session_store
from docchat.state.auth import AuthController
from docchat.state.chat import EMPTY_CONTEXT_ERROR, ChatController
from docchat.state.documents import DocumentSelection
from docchat.ui.theme import CUSTOM_CSS


def _message_time(message: ChatMessage) -> str:
    return datetime.fromtimestamp(message.timestamp / 1000).strftime("%I:%M %p")


@ui.page("/")
def chat_page() -> RedirectResponse | None:
    """Main chat page."""
    auth = AuthController(HttpAuthBackend(), get_session_store())
    if not auth.is_logged_in:
        return RedirectResponse("/login")

    ui.add_head_html(CUSTOM_CSS)

    config = get_client_config()
    client = ApiClient(config)
    chat = ChatController(client)
    documents = DocumentSelection(client, limit=config.document_limit)

    messages_container: ui.column
    results_container: ui.column
    chips_container: ui.row
    search_input: ui.input
    input_field: ui.textarea
    shown_errors: dict[str, str] = {}

    def surface_error(source: str, error: str) -> None:
        if error and shown_errors.get(source) != error:
            ui.notify(error, type="negative")
        shown_errors[source] = error

    def render_message(msg: ChatMessage) -> None:
        is_user = msg.is_from_user
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            with ui.column().classes("max-w-[75%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                    if is_user:
                        content = f"You: {escape_html(msg.content)}".replace("\n", "<br>")
                    else:
                        content = lines_to_html(msg.lines)
                    ui.html(content, sanitize=False).classes("text-sm leading-relaxed")
                ui.label(_message_time(msg)).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )

    def refresh_messages(controller: ChatController) -> None:
        messages_container.clear()
        with messages_container:
            if not controller.messages:
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.icon("forum").classes("text-5xl text-gray-300")
                    ui.label("Select documents and start a conversation").classes(
                        "text-lg text-gray-400"
                    )
            else:
                for msg in controller.messages:
                    render_message(msg)
        surface_error("chat", controller.error)

    def render_result(document: RelatedDocument) -> None:
        with ui.row().classes("w-full document-card p-2 gap-2 items-start no-wrap"):
            ui.checkbox(
                value=documents.is_selected(document),
                on_change=lambda e, d=document: documents.toggle_selection(d, e.value),
            )
            with ui.column().classes("gap-0 flex-grow"):
                ui.label(document.title).classes("text-sm font-medium")
                ui.label(document.abstract).classes("text-xs text-gray-500 line-clamp-3")

    def render_chip(document: RelatedDocument) -> None:
        def on_remove(e: ValueChangeEventArguments) -> None:
            if not e.value:
                documents.deselect(document)

        ui.chip(document.title, removable=True, on_value_change=on_remove).props(
            "dense color=teal-1"
        )

    def refresh_documents(selection: DocumentSelection) -> None:
        results_container.clear()
        with results_container:
            if not selection.results:
                ui.label("No documents yet").classes("text-sm text-gray-400")
            for document in selection.results:
                render_result(document)
        chips_container.clear()
        with chips_container:
            for document in selection.selected:
                render_chip(document)
        surface_error("documents", selection.error)

    async def search() -> None:
        await documents.search(search_input.value or "")

    async def send_message() -> None:
        text = (input_field.value or "").strip()
        if not text:
            return
        if not documents.has_selection:
            ui.notify(EMPTY_CONTEXT_ERROR, type="warning")
            return

        input_field.value = ""
        await chat.send_message(text, documents.build_context())

    def sign_out() -> None:
        auth.logout()
        ui.navigate.to("/login")

    # === UI Layout ===
    with ui.left_drawer(value=True).classes("bg-white p-4 gap-3") as drawer:
        ui.label("Related documents").classes("text-base font-semibold")
        with ui.row().classes("w-full gap-2 items-center no-wrap"):
            search_input = (
                ui.input(placeholder="Search by title...")
                .props("outlined dense")
                .classes("flex-grow")
                .on("keydown.enter", search)
            )
            ui.button(icon="search", on_click=search).props("round unelevated").classes(
                "send-btn text-white"
            )
        ui.spinner(size="md").bind_visibility_from(documents, "is_loading")
        results_container = ui.column().classes("w-full gap-2")
        ui.space()
        ui.button("Sign out", icon="logout", on_click=sign_out).props("flat color=negative")

    with ui.header().classes("header px-5 py-3 items-center justify-between"):
        with ui.row().classes("items-center gap-3"):
            ui.button(icon="menu", on_click=drawer.toggle).props("flat round color=white")
            ui.icon("smart_toy").classes("text-white text-3xl")
            ui.label("Document Chat").classes("text-lg font-semibold text-white")
        ui.button(icon="add", on_click=chat.clear).props("flat round color=white")

    with ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
        "height: calc(100vh - 6rem)"
    ):
        # Selected documents
        chips_container = ui.row().classes("w-full px-4 pt-3 gap-1")

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full bg-gray-50"),
            ui.column().classes("w-full p-5"),
        ):
            messages_container = ui.column().classes("w-full gap-4")
            ui.spinner("dots", size="lg").bind_visibility_from(chat, "is_loading")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end bg-white border-t"):
            with ui.element("div").classes("flex-grow input-box px-3 py-2"):
                input_field = (
                    ui.textarea(placeholder="Ask about the selected documents...")
                    .props("autogrow borderless dense rows=1")
                    .classes("w-full")
                    .on("keydown.enter.prevent", send_message)
                )
            ui.button(icon="send", on_click=send_message).props("round unelevated").classes(
                "send-btn"
            )

    chat.subscribe(refresh_messages)
    documents.subscribe(refresh_documents)
    refresh_messages(chat)
    refresh_documents(documents)
    return None
