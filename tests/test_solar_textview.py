import io

from astrosim.solar.body import Body
from astrosim.solar.textview import TextViewer, main, run_demo

EMPTY = "Le système est vide.\n\n"
SEPARATOR_LINE = "\n--------------------------------------------\n\n"

EXPECTED_DEMO = (
    "Le système est à l'état suivant : \n\n"
    + EMPTY
    + "\n\n"
    + (EMPTY + SEPARATOR_LINE) * 15
    + "Après vidage, le système contient les particules suivantes :\n\n"
    + EMPTY
)


def test_draw_message_appends_newline():
    out = io.StringIO()
    TextViewer(out).draw_message("bonjour")
    assert out.getvalue() == "bonjour\n"


def test_draw_body_writes_nothing():
    out = io.StringIO()
    viewer = TextViewer(out)
    viewer.draw_body(Body())
    Body().draw_on(viewer)
    assert out.getvalue() == ""


def test_run_demo_output():
    out = io.StringIO()
    run_demo(out)
    assert out.getvalue() == EXPECTED_DEMO


def test_main_prints_demo(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == EXPECTED_DEMO