import sys
from pathlib import Path

import aura
from aura import Arithma, Math, Random, Vector2, Vector3
from aura.types import SamplingParams

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from run_sampling_demo import parse_params, run  # noqa: E402


def test_flat_namespace_members():
    assert Math is Arithma
    assert aura.Math.mean([1, 2, 3]) == 2
    assert isinstance(Random.uniform(0, 1), float)
    assert Vector2(1, 0).dot(Vector2(0, 1)) == 0
    assert Vector3(0, 0, 2).length() == 2
    for name in ("Random", "Arithma", "Math", "Vector2", "Vector3"):
        assert name in aura.__all__


def test_demo_report_matches_weights():
    params = SamplingParams(seed=3, draws=4000, low=-1.0, high=1.0, items=("a", "b"), weights=(1.0, 3.0))
    report = run(params)
    assert abs(report["frequencies"]["b"] - 0.75) < 0.05
    assert report["expected"] == {"a": 0.25, "b": 0.75}
    assert -1.0 <= report["min"] <= report["max"] < 1.0
    assert abs(report["mean"]) < 0.1
    assert report["resultant"] < 0.1


def test_demo_argument_parsing():
    params, args = parse_params(["--seed", "5", "--draws", "10", "--items", "x", "y", "z", "--weights", "1", "0", "2"])
    assert params.seed == 5
    assert params.draws == 10
    assert params.items == ("x", "y", "z")
    assert params.weights == (1.0, 0.0, 2.0)
    assert not args.plot
