"""Shared fixtures: a fake DynamoDB table, sample deals and a fixed clock."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest

from sharktank.models.deal import Deal
from sharktank.vendors.aws.dynamodb_table import DynamoDBTable


class FakeTable:
    """Stands in for a boto3 Table; serves scans in fixed-size pages."""

    def __init__(self, items: list[dict] | None = None, page_size: int = 100) -> None:
        self.items = list(items or [])
        self.page_size = page_size
        self.scan_calls: list[dict[str, Any]] = []
        self.put_calls: list[dict[str, Any]] = []
        self.fail_with: Exception | None = None

    def scan(self, **kwargs: Any) -> dict:
        if self.fail_with is not None:
            raise self.fail_with
        self.scan_calls.append(kwargs)
        start = kwargs.get("ExclusiveStartKey", {}).get("offset", 0)
        page = self.items[start: start + self.page_size]
        response: dict[str, Any] = {"Items": page}
        if start + self.page_size < len(self.items):
            response["LastEvaluatedKey"] = {"offset": start + self.page_size}
        return response

    def put_item(self, Item: dict) -> None:  # noqa: N803
        if self.fail_with is not None:
            raise self.fail_with
        self.put_calls.append(Item)
        self.items = [item for item in self.items if item["id"] != Item["id"]] + [Item]


@pytest.fixture
def fake_table() -> FakeTable:
    return FakeTable(
        [
            {
                "id": "1#1#Acme",
                "category": "Technology",
                "closed_deal": True,
                "participants": ["Ana"],
                "investors": ["Caito"],
                "amount_requested": Decimal("100000"),
                "equity_offered": Decimal("10"),
                "amount_negotiated": Decimal("80000"),
                "equity_negotiated": Decimal("12.5"),
                "proposal_type": "Equity",
                "description": "Rockets",
            },
            {
                "id": "2#3#Bolo",
                "category": "Food",
                "closed_deal": False,
                "participants": ["Bia", "Caio"],
                "amount_requested": Decimal("50000"),
                "equity_offered": Decimal("5"),
                "description": "Cakes",
            },
        ]
    )


@pytest.fixture
def dynamo_table(fake_table: FakeTable) -> DynamoDBTable:
    return DynamoDBTable(table=fake_table)


def make_deal(
    season: int,
    episode: int,
    company: str,
    **overrides: Any,
) -> Deal:
    """Build a parsed Deal with sensible defaults for filter/sort tests."""
    raw = {
        "id": f"{season}#{episode}#{company}",
        "category": "Tech",
        "closed_deal": False,
        "participants": [],
        "investors": [],
        "amount_requested": 100000,
        "equity_offered": 10,
        "description": "",
    }
    raw.update(overrides)
    return Deal.from_raw(raw)


@pytest.fixture
def deals() -> list[Deal]:
    return [
        make_deal(1, 1, "Acme", category="Technology", closed_deal=True,
                  participants=["Ana Silva"], investors=["Caito Maia"],
                  amount_requested=200000, amount_negotiated=150000,
                  description="Smart locks"),
        make_deal(1, 2, "bolo", category="Food", participants=["Bruno"],
                  amount_requested=50000, description="Homemade cakes"),
        make_deal(2, 1, "Cafe", category="Food", closed_deal=True,
                  participants=["Carla", "Davi"], investors=["Camila Farani", "Caito Maia"],
                  amount_requested=120000, amount_negotiated=100000,
                  description="Coffee subscription"),
        make_deal(2, 4, "Drone", category="Tech", participants=["Eva"],
                  amount_requested=300000, description="Delivery drones"),
        make_deal(3, 1, "Eco", category="Tech", closed_deal=True,
                  participants=["Fabio"], investors=["Joao Appolinario"],
                  amount_requested=50000, amount_negotiated=50000,
                  description="Recycled packaging"),
    ]


class FixedClock:
    """Callable clock in epoch milliseconds that tests can move."""

    def __init__(self, now: int = 1_700_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def deal_factory():
    return make_deal
