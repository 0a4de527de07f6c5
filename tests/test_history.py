from academia.history import History


def test_add_keeps_order_and_counts():
    history = History()
    history.add("first")
    history.add("second")
    assert len(history) == 2
    assert list(history) == ["first", "second"]


def test_new_history_is_empty():
    assert len(History()) == 0
    assert list(History()) == []


def test_render_empty_shows_notice():
    text = History().render()
    assert "HISTORIAL DE OPERACIONES" in text
    assert text.endswith("  [!] No hay operaciones registradas aun.\n")


def test_render_numbers_entries():
    history = History()
    history.add("alpha")
    history.add("beta")
    text = history.render()
    assert "  Total de operaciones: 2\n" in text
    assert "    1.  alpha\n" in text
    assert "    2.  beta\n" in text
    assert text.index("alpha") < text.index("beta")


def test_clear_removes_entries():
    history = History()
    history.add("alpha")
    history.clear()
    assert len(history) == 0
    assert "No hay operaciones registradas" in history.render()


def test_iteration_is_a_snapshot():
    history = History()
    history.add("alpha")
    snapshot = iter(history)
    history.add("beta")
    assert list(snapshot) == ["alpha"]