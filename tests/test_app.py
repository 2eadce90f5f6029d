from streamlit.testing.v1 import AppTest

from engine import ReplacementPolicy

APP = "../app.py"


def test_app_renders_default_sequence():
    at = AppTest.from_file(APP).run()
    assert not at.exception
    controller = at.session_state["controller"]
    assert controller.total == 13
    assert controller.position == 0


def test_step_and_reset_buttons():
    at = AppTest.from_file(APP).run()
    at.button(key="step").click().run()
    at.button(key="step").click().run()
    assert not at.exception
    assert at.session_state["controller"].position == 2

    at.button(key="reset").click().run()
    assert at.session_state["controller"].position == 0


def test_changing_policy_rebuilds_steps():
    at = AppTest.from_file(APP).run()
    at.button(key="step").click().run()
    at.sidebar.selectbox[0].select("OPT").run()
    assert not at.exception
    assert at.session_state["config"][1] == "OPT"
    assert at.session_state["controller"].position == 0


def test_concepts_page():
    at = AppTest.from_file(APP).run()
    at.sidebar.radio[0].set_value("Concepts").run()
    assert not at.exception
    assert any("Replacement" in h.value for h in at.header)


def test_compare_view_draws_every_policy_at_the_same_step():
    at = AppTest.from_file(APP).run()
    at.button(key="step").click().run()
    assert not at.exception

    assert [h.value for h in at.subheader if h.value in ReplacementPolicy.ALL] == list(ReplacementPolicy.ALL)
    charts = at.get("plotly_chart")
    # current-policy slots, hits vs faults, then one slot chart per policy
    assert len(charts) == 2 + len(ReplacementPolicy.ALL)
    for chart in charts[-len(ReplacementPolicy.ALL):]:
        assert "S0: 7" in chart.proto.spec
