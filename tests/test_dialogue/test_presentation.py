import io

from colloquy.dialogue.presentation import NullPresenter, Presenter, TextPresenter


def test_presenters_satisfy_protocol():
    assert isinstance(NullPresenter(), Presenter)
    assert isinstance(TextPresenter(io.StringIO()), Presenter)


def test_text_presenter_output():
    stream = io.StringIO()
    presenter = TextPresenter(stream)

    presenter.render_line("Mira", "Where to?")
    presenter.render_choices(["The shop", "Goodbye"])
    presenter.render_line("", "The wind howls.")
    presenter.hide()

    assert stream.getvalue().splitlines() == [
        "Mira: Where to?",
        "  1. The shop",
        "  2. Goodbye",
        "The wind howls.",
        "",
    ]
    assert not presenter.visible


def test_hide_when_hidden_writes_nothing():
    stream = io.StringIO()
    presenter = TextPresenter(stream)

    presenter.hide()

    assert stream.getvalue() == ""
