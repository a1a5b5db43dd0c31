import os

from visualization.benchmark_visualizer import visualize_benchmark


def test_benchmark_chart_is_saved_as_png(tmp_path):
    out_dir = tmp_path / "results"
    per_class = {"decimal": 0.004, "octal": 0.005, "hex": 0.006, "invalid": 0.002}

    path = visualize_benchmark(per_class, n=1000, out_dir=str(out_dir))

    assert path is not None
    assert os.path.dirname(path) == str(out_dir)
    assert os.path.basename(path).startswith("parse_benchmark_")
    assert path.endswith(".png")
    assert os.path.getsize(path) > 0


def test_empty_benchmark_is_skipped(tmp_path):
    assert visualize_benchmark({}, n=1000, out_dir=str(tmp_path)) is None
    assert os.listdir(tmp_path) == []
