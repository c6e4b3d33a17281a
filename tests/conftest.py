"""Shared fixtures for the Products UI tests."""

import pytest

from tests.fixtures import payment_response, product_response


@pytest.fixture
def product_data():
    return product_response()


@pytest.fixture
def payment_data():
    return payment_response()
