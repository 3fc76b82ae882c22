import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from adjacency_graphs.cli import EXIT_GRAPH_ERROR, EXIT_IO_ERROR, EXIT_OK, main  # noqa: E402


def _write_graph(tmp_path: Path, content: str, name: str = "graph.txt") -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_prints_both_edge_lists(tmp_path: Path, capsys):
    # Matrix edges first, then list edges, mirroring the original tool's output order.
    path = _write_graph(tmp_path, "3 2\n1 2\n0 1 4\n")

    assert main([str(path)]) == EXIT_OK

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Edges of the adjacency-matrix graph:",
        "0 1 4",
        "1 2 1",
        "Edges of the adjacency-list graph:",
        "1 2 1",
        "0 1 4",
    ]


def test_one_based_strict_input(tmp_path: Path, capsys):
    path = _write_graph(tmp_path, "3 2\n1 2 5\n3 2 1\n")

    assert main([str(path), "--one-based", "--strict"]) == EXIT_OK

    out = capsys.readouterr().out
    assert "1 2 5" in out
    assert "2 3 1" in out  # matrix reports the upper triangle
    assert "3 2 1" in out  # list keeps the input orientation


def test_directed_flag(tmp_path: Path, capsys):
    path = _write_graph(tmp_path, "2 1\n1 0\n")

    assert main([str(path), "--directed"]) == EXIT_OK

    out = capsys.readouterr().out.splitlines()
    assert out.count("1 0 1") == 2
    assert "0 1 1" not in out


def test_stats_table(tmp_path: Path, capsys):
    path = _write_graph(tmp_path, "4 2\n0 1\n2 3\n")

    assert main([str(path), "--stats"]) == EXIT_OK

    out = capsys.readouterr().out
    assert "Vertices: 4  Edges: 2" in out
    assert "adjacency matrix" in out
    assert "Matrix density: 25.0%" in out


def test_custom_comment_prefix(tmp_path: Path, capsys):
    path = _write_graph(tmp_path, "c dimacs-style comment\n2 1\n0 1\n")

    assert main([str(path), "--comment-prefix", "c"]) == EXIT_OK


@pytest.mark.parametrize(
    "content, fragment",
    [
        ("3 1\n0 3\n", "Line 2"),
        ("three\n", "Line 1"),
        ("3 2\n0 1\n", "Edge count mismatch"),
        ("2 1\n0 1 x\n", "Weight 'x'"),
    ],
)
def test_graph_errors_exit_one(tmp_path: Path, capsys, content, fragment):
    path = _write_graph(tmp_path, content)

    assert main([str(path)]) == EXIT_GRAPH_ERROR

    captured = capsys.readouterr()
    assert captured.out == ""
    assert fragment in captured.err


def test_strict_requires_weights(tmp_path: Path, capsys):
    path = _write_graph(tmp_path, "2 1\n0 1\n")

    assert main([str(path), "--strict"]) == EXIT_GRAPH_ERROR


def test_blank_comment_prefix_is_configuration_error(tmp_path: Path, capsys):
    path = _write_graph(tmp_path, "2 1\n0 1\n")

    assert main([str(path), "--comment-prefix", " "]) == EXIT_GRAPH_ERROR
    assert "comment_prefix" in capsys.readouterr().err


def test_missing_file_exit_two(tmp_path: Path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == EXIT_IO_ERROR

    assert "absent.txt" in capsys.readouterr().err


def test_non_utf8_file_exit_one(tmp_path: Path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"2 1\n0 1 \xff\n")

    assert main([str(path)]) == EXIT_GRAPH_ERROR

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "binary.txt" in captured.err
    assert "UTF-8" in captured.err


def test_directory_path_exit_two(tmp_path: Path, capsys):
    assert main([str(tmp_path)]) == EXIT_IO_ERROR

    assert capsys.readouterr().err.startswith("error: ")


def test_inexact_weight_exit_one(tmp_path: Path, capsys):
    path = _write_graph(tmp_path, f"2 1\n0 1 {2**53 + 1}\n")

    assert main([str(path)]) == EXIT_GRAPH_ERROR

    assert "float64" in capsys.readouterr().err


def test_cli_subprocess(tmp_path: Path):
    # Run the module as a subprocess to mimic the installed console script.
    path = _write_graph(tmp_path, "# triangle\n3 3\n0 1\n1 2\n2 0 2\n")
    env = dict(os.environ, PYTHONPATH=str(PROJECT_ROOT / "src"))

    proc = subprocess.run(
        [sys.executable, "-m", "adjacency_graphs.cli", str(path), "-vv"],
        cwd=tmp_path,
        capture_output=True,
        text=True,
        env=env,
        check=True,
    )

    assert proc.stdout.startswith("Edges of the adjacency-matrix graph:")
    assert "0 2 2" in proc.stdout
    assert "DEBUG" in proc.stderr
    assert "Built undirected graph representations" in proc.stderr


def test_cli_subprocess_error_status(tmp_path: Path):
    path = _write_graph(tmp_path, "2 1\n0 5\n")
    env = dict(os.environ, PYTHONPATH=str(PROJECT_ROOT / "src"))

    proc = subprocess.run(
        [sys.executable, "-m", "adjacency_graphs.cli", str(path)],
        capture_output=True,
        text=True,
        env=env,
    )

    assert proc.returncode == EXIT_GRAPH_ERROR
    assert "Vertex 5" in proc.stderr
