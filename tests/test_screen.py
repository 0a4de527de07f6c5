import io
from unittest import mock

from academia.screen import Console, banner, clear_screen, line, menu


def test_line_repeats_character():
    assert line("*", 5) == "*****"


def test_line_default_is_wide_equals_rule():
    rule = line()
    assert len(rule) == 62
    assert set(rule) == {"="}


def test_banner_frames_quote():
    text = banner("hola")
    assert text.startswith("\n" + "*" * 62 + "\n")
    assert "SISTEMA ACADEMICO PROFESIONAL v3.0" in text
    assert text.endswith("  hola\n")


def test_menu_lists_all_options_in_order():
    text = menu()
    positions = [text.index(f"[{n}]") for n in range(1, 12)]
    assert positions == sorted(positions)
    assert "[11] Guardar y Salir" in text
    assert text.endswith(">>> Seleccione una opcion: ")


def test_console_write_goes_to_output():
    out = io.StringIO()
    Console(output=out).write("abc")
    assert out.getvalue() == "abc"


def test_console_ask_shows_prompt_and_returns_line():
    out = io.StringIO()
    answers = iter(["respuesta"])
    console = Console(input_func=lambda: next(answers), output=out)
    assert console.ask("Pregunta: ") == "respuesta"
    assert out.getvalue() == "Pregunta: "


def test_console_pause_consumes_one_line():
    out = io.StringIO()
    answers = iter(["", "next"])
    console = Console(input_func=lambda: next(answers), output=out)
    console.pause()
    assert "Presione ENTER para continuar..." in out.getvalue()
    assert next(answers) == "next"


def test_console_pause_tolerates_end_of_input():
    out = io.StringIO()

    def closed():
        raise EOFError

    Console(input_func=closed, output=out).pause()
    assert out.getvalue().endswith("Presione ENTER para continuar...")


@mock.patch("academia.screen.subprocess.run")
def test_clear_screen_uses_clear_on_posix(run):
    with mock.patch("academia.screen.sys.platform", "linux"):
        assert clear_screen() == "clear"
    run.assert_called_once()
    assert run.call_args.args[0] == "clear"


@mock.patch("academia.screen.subprocess.run")
def test_clear_screen_uses_cls_on_windows(run):
    with mock.patch("academia.screen.sys.platform", "win32"):
        assert clear_screen() == "cls"
    assert run.call_args.args[0] == "cls"


@mock.patch("academia.screen.subprocess.run", side_effect=OSError)
def test_clear_screen_survives_missing_command(run):
    with mock.patch("academia.screen.sys.platform", "linux"):
        assert clear_screen() == "clear"