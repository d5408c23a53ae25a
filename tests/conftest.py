"""Shared test fixtures for the carver test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest


# 3 columns x 4 rows, (R, G, B) per pixel, row-major
REFERENCE_3X4 = [
    [(255, 101, 51), (255, 101, 153), (255, 101, 255)],
    [(255, 153, 51), (255, 153, 153), (255, 153, 255)],
    [(255, 203, 51), (255, 204, 153), (255, 205, 255)],
    [(255, 255, 51), (255, 255, 153), (255, 255, 255)],
]

# Energy map with a unique cheapest seam in both orientations
ENERGY_6X5 = [
    [57685.0, 50893.0, 91370.0, 25418.0, 33055.0, 37246.0],
    [15421.0, 56334.0, 22808.0, 54796.0, 11641.0, 25496.0],
    [12344.0, 19236.0, 52030.0, 17708.0, 44735.0, 20663.0],
    [17074.0, 23678.0, 30279.0, 80663.0, 37831.0, 45595.0],
    [32337.0, 30796.0, 4909.0, 73334.0, 40613.0, 36556.0],
]


def make_image(rows):
    """Build a (3, H, W) uint8 tensor from rows of (R, G, B) tuples."""
    return torch.tensor(rows, dtype=torch.uint8).permute(2, 0, 1).contiguous()


def make_random_image(H, W, seed=42):
    generator = torch.Generator().manual_seed(seed)
    return torch.randint(0, 256, (3, H, W), dtype=torch.uint8, generator=generator)


def make_index_image(H, W):
    """Every pixel encodes its own position: R = row, G = column."""
    image = torch.zeros(3, H, W, dtype=torch.uint8)
    image[0] = torch.arange(H).to(torch.uint8).unsqueeze(1)
    image[1] = torch.arange(W).to(torch.uint8).unsqueeze(0)
    return image


@pytest.fixture
def reference_image():
    return make_image(REFERENCE_3X4)


@pytest.fixture
def energy_6x5():
    return torch.tensor(ENERGY_6X5, dtype=torch.float64)
