import pytest

from inboxdesk.compose import (
    AttachmentList,
    AttachmentSideBar,
    ComposeView,
    EmailEditor,
)
from inboxdesk.container import ServiceContainer
from inboxdesk.events import (
    AttachToEmailEvent,
    EmailDraft,
    EventBus,
    SaveEmailClickedEvent,
    SendEmailClickedEvent,
    SideBarButtonClickedEvent,
    View,
)


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def container(bus):
    services = ServiceContainer()
    services.add_singleton(bus)
    return services


def test_attachment_list_add_and_files():
    model = AttachmentList()
    model.add(["a.txt", "b.pdf"])
    model.add(["c.png"])
    assert model.files() == ["a.txt", "b.pdf", "c.png"]
    assert len(model) == 3


def test_attachment_list_remove():
    model = AttachmentList(["a.txt", "b.pdf", "c.png"])
    model.remove(1)
    assert list(model) == ["a.txt", "c.png"]


@pytest.mark.parametrize("index", [-1, 3])
def test_attachment_list_remove_out_of_range(index):
    model = AttachmentList(["a.txt", "b.pdf", "c.png"])
    with pytest.raises(IndexError):
        model.remove(index)
    assert model.files() == ["a.txt", "b.pdf", "c.png"]


def test_files_returns_a_copy():
    model = AttachmentList(["a.txt"])
    model.files().append("b.txt")
    assert model.files() == ["a.txt"]


def test_attachment_list_header():
    model = AttachmentList()
    assert model.header == "Filename"
    model.add(["only.txt"])
    assert model.files() == ["only.txt"]
    assert model.header == "Filename"


def test_editor_toolbar_order(container):
    editor = EmailEditor(container)
    assert list(editor.toolbar) == ["Send", "Save", "Attach"]


def test_send_emits_live_draft(container, bus):
    received = []
    bus.subscribe(SendEmailClickedEvent, received.append)
    editor = EmailEditor(container)
    editor.draft().subject = "Hello"
    editor.toolbar["Send"]()
    assert len(received) == 1
    assert received[0].data is editor.draft()
    assert received[0].data.subject == "Hello"


def test_save_emits_save_event(container, bus):
    saved, sent = [], []
    bus.subscribe(SaveEmailClickedEvent, saved.append)
    bus.subscribe(SendEmailClickedEvent, sent.append)
    editor = EmailEditor(container)
    editor.toolbar["Save"]()
    assert [event.data for event in saved] == [editor.draft()]
    assert sent == []


def test_editor_draft_starts_empty(container):
    assert EmailEditor(container).draft() == EmailDraft()


def test_attach_uses_chooser(container, bus):
    received = []
    bus.subscribe(AttachToEmailEvent, received.append)
    editor = EmailEditor(container, choose_files=lambda: ["x.doc", "y.doc"])
    editor.toolbar["Attach"]()
    assert [event.attachments for event in received] == [["x.doc", "y.doc"]]


def test_attach_without_chooser_attaches_nothing(container, bus):
    received = []
    bus.subscribe(AttachToEmailEvent, received.append)
    EmailEditor(container).toolbar["Attach"]()
    assert [event.attachments for event in received] == [[]]


def test_side_bar_collects_attach_events(container, bus):
    side_bar = AttachmentSideBar(container)
    bus.emit(AttachToEmailEvent(["a.txt"]))
    bus.emit(AttachToEmailEvent(["b.txt", "c.txt"]))
    assert side_bar.attachments() == ["a.txt", "b.txt", "c.txt"]


def test_side_bar_ignores_side_bar_clicks(container, bus):
    side_bar = AttachmentSideBar(container)
    bus.emit(SideBarButtonClickedEvent(View.EMAIL_VIEW))
    assert side_bar.attachments() == []


def test_side_bar_remove_through_model(container, bus):
    side_bar = AttachmentSideBar(container)
    bus.emit(AttachToEmailEvent(["a.txt", "b.txt"]))
    side_bar.model.remove(0)
    assert side_bar.attachments() == ["b.txt"]


def test_compose_view_wires_editor_to_side_bar(container):
    view = ComposeView(container, choose_files=lambda: ["report.pdf"])
    view.editor.toolbar["Attach"]()
    assert view.attachment_side_bar.attachments() == ["report.pdf"]


def test_compose_view_structure(container):
    view = ComposeView(container)
    assert view.editor.parent is view.left
    assert view.attachment_side_bar.parent is view.right
    assert view.left.parent is view
    assert view.has_open_in_new is True
    assert view.is_dialog is False


def test_open_in_new_creates_dialog(container):
    view = ComposeView(container)
    dialog = view.open_in_new()
    assert dialog.is_dialog is True
    assert dialog.has_open_in_new is False
    assert dialog.parent is view
    assert dialog.title == "Compose Email"
    assert view.dialogs == [dialog]


def test_dialog_and_main_view_both_receive_attachments(container, bus):
    view = ComposeView(container)
    dialog = view.open_in_new()
    bus.emit(AttachToEmailEvent(["a.txt"]))
    assert view.attachment_side_bar.attachments() == ["a.txt"]
    assert dialog.attachment_side_bar.attachments() == ["a.txt"]


def test_set_is_dialog(container):
    view = ComposeView(container)
    view.set_is_dialog(True)
    assert view.is_dialog is True
    view.set_is_dialog(False)
    assert view.is_dialog is False