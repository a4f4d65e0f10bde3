from aperiodic_tiles.analysis import MathAnalysisTool


def test_initial_state_is_empty():
    tool = MathAnalysisTool()
    assert tool.symmetry_result == ""
    assert tool.bar_sets == {}


def test_symmetry_result():
    tool = MathAnalysisTool()
    assert tool.analyze_symmetry() == "对称群类型: p1"
    assert tool.symmetry_result == "对称群类型: p1"


def test_frequency_bar_set():
    tool = MathAnalysisTool()
    assert tool.analyze_frequency() == {"频率": [10, 20, 30]}


def test_frequency_replaces_previous_sets():
    tool = MathAnalysisTool()
    tool.analyze_frequency()
    tool.bar_sets["频率"].append(99)
    assert tool.analyze_frequency() == {"频率": [10, 20, 30]}
    assert len(tool.bar_sets) == 1