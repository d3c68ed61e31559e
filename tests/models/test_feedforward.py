from __future__ import annotations

import numpy as np
import pytest

from core.errors import OutOfRangeError
from core.protocols import EncodableModel, LayeredNetwork
from models.feedforward import FeedForwardNetwork


def test_counts_with_bias() -> None:
    net = FeedForwardNetwork([3, 4, 2])
    assert net.layer_count == 3
    assert [net.layer_neuron_count(l) for l in range(3)] == [3, 4, 2]
    assert [net.layer_total_neuron_count(l) for l in range(3)] == [4, 5, 2]
    assert net.weight_matrix(0).shape == (4, 4)
    assert net.weight_matrix(1).shape == (5, 2)
    assert net.encoded_array_length() == 26


def test_counts_without_bias() -> None:
    net = FeedForwardNetwork([3, 4, 2], bias=False)
    assert [net.layer_total_neuron_count(l) for l in range(3)] == [3, 4, 2]
    assert net.encoded_array_length() == 20


def test_satisfies_protocols() -> None:
    net = FeedForwardNetwork([2, 2])
    assert isinstance(net, LayeredNetwork)
    assert isinstance(net, EncodableModel)


@pytest.mark.parametrize("sizes", [[], [3], [3, 0], [2, -1, 2]])
def test_rejects_bad_sizes(sizes: list[int]) -> None:
    with pytest.raises(ValueError):
        FeedForwardNetwork(sizes)


def test_bias_weight_is_last_row() -> None:
    net = FeedForwardNetwork([2, 3])
    net.set_weight(0, 2, 1, 7.0)
    assert net.weight_matrix(0)[2, 1] == 7.0
    assert net.get_weight(0, 2, 1) == 7.0


@pytest.mark.parametrize(
    "index",
    [(1, 0, 0), (-1, 0, 0), (0, 5, 0), (0, 0, 4), (0, -1, 0)],
)
def test_weight_access_out_of_range(index: tuple[int, int, int]) -> None:
    net = FeedForwardNetwork([4, 4])
    with pytest.raises(OutOfRangeError):
        net.get_weight(*index)
    with pytest.raises(OutOfRangeError):
        net.set_weight(*index, 1.0)


def test_layer_count_queries_out_of_range() -> None:
    net = FeedForwardNetwork([2, 2])
    with pytest.raises(OutOfRangeError):
        net.layer_neuron_count(2)
    with pytest.raises(OutOfRangeError):
        net.layer_total_neuron_count(-1)


def test_encode_decode_layout() -> None:
    net = FeedForwardNetwork([1, 2, 1])
    values = np.arange(1, 8, dtype=np.float64)
    net.decode_from_array(values)
    np.testing.assert_array_equal(net.weight_matrix(0), [[1.0, 2.0], [3.0, 4.0]])
    np.testing.assert_array_equal(net.weight_matrix(1), [[5.0], [6.0], [7.0]])
    assert net.get_weight(1, 2, 0) == 7.0
    np.testing.assert_array_equal(net.parameters_vector(), values)


def test_decode_copies_buffer() -> None:
    net = FeedForwardNetwork([1, 1], bias=False)
    buf = np.array([3.0])
    net.decode_from_array(buf)
    buf[0] = 9.0
    assert net.get_weight(0, 0, 0) == 3.0


def test_encode_decode_wrong_length() -> None:
    net = FeedForwardNetwork([2, 2])
    with pytest.raises(ValueError):
        net.encode_to_array(np.zeros(5))
    with pytest.raises(ValueError):
        net.decode_from_array(np.zeros(7))
