import io

from drills.widgets import Button, Label, Window, main


def render(widget):
    buffer = io.StringIO()
    widget.draw_into(buffer)
    return buffer.getvalue()


def sample_window():
    window = Window("Text GUI Demo 1.23")
    window.add_widget(Label("This is a small text GUI demo."))
    window.add_widget(Button("Click me!"))
    return window


def test_label_draws_its_text():
    assert render(Label("hello")) == "hello\n"


def test_label_width_is_longest_line():
    assert Label("ab\ncdef\ng").width() == len("cdef")
    assert Label("").width() == 0


def test_button_width_adds_padding():
    assert Button("Click me!").width() == len("Click me!") + 8


def test_button_rendering():
    lines = render(Button("ab")).splitlines()
    assert lines[0] == "+" + "-" * 10 + "+"
    assert lines[1] == "|    ab    |"
    assert lines[-1] == lines[0]


def test_button_lines_all_same_length():
    button = Button("one\nthree")
    for line in render(button).splitlines():
        assert len(line) == button.width() + 2


def test_window_lines_match_width():
    window = sample_window()
    lines = render(window).splitlines()
    assert all(len(line) == window.width() for line in lines)


def test_window_structure():
    lines = render(sample_window()).splitlines()
    assert lines[0] == lines[-1]
    assert set(lines[0][1:-1]) == {"-"}
    assert set(lines[2][1:-1]) == {"="}
    assert "Text GUI Demo 1.23" in lines[1]
    assert any("This is a small text GUI demo." in line for line in lines)
    assert any("Click me!" in line for line in lines)


def test_title_odd_padding_goes_right():
    window = Window("abc")
    window.add_widget(Label("abcd"))
    lines = render(window).splitlines()
    assert lines[1] == "| abc  |"


def test_empty_window_width_follows_title():
    window = Window("title")
    assert window.width() == len("title") + 4
    assert len(render(window).splitlines()) == 4


def test_draw_prints_rendering(capsys):
    window = sample_window()
    window.draw()
    assert capsys.readouterr().out == render(window) + "\n"


def test_main(capsys):
    assert main([]) == 0
    assert "Click me!" in capsys.readouterr().out