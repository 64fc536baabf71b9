# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 multiorder Rui Pinheiro

from typing import Any

import pytest

from pydantic import BaseModel, ValidationError

from multiorder import OrderedContainer


class IntContainer(OrderedContainer[int]):
    pass


class Scores(BaseModel):
    values: OrderedContainer[int]


class Labels(BaseModel):
    labels: OrderedContainer[str] = OrderedContainer[str]()


class Anything(BaseModel):
    items: OrderedContainer


class Subclassed(BaseModel):
    values: IntContainer


@pytest.mark.container
@pytest.mark.pydantic
class TestOrderedContainerPydantic:
    def test_validate_from_list(self):
        model = Scores(values=[3, 1, 2])
        assert isinstance(model.values, OrderedContainer)
        assert model.values.data == (3, 1, 2)
        assert list(model.values.ascending_order()) == [1, 2, 3]

    def test_validate_coerces_items(self):
        model = Scores.model_validate({"values": ["3", 1, 2.0]})
        assert model.values.data == (3, 1, 2)

    def test_validate_from_container_and_view(self):
        source = OrderedContainer[int]([5, 4])
        model = Scores(values=source)
        assert model.values == source
        assert model.values is not source

        model = Scores(values=source.ascending_order())
        assert model.values.data == (4, 5)

    def test_invalid_items(self):
        with pytest.raises(ValidationError):
            Scores(values=["not a number"])

        with pytest.raises(ValidationError):
            Scores(values=5)

    def test_unordered_items_are_a_validation_error(self):
        with pytest.raises(ValidationError):
            Anything(items=[1, {}])

    def test_untyped_container(self):
        model = Anything(items=[1, "a"])
        assert model.items.data == (1, "a")
        assert OrderedContainer.get_element_type() is Any

    def test_dump(self):
        model = Scores(values=[3, 1, 2])
        assert model.model_dump() == {"values": [3, 1, 2]}
        assert model.model_dump_json() == '{"values":[3,1,2]}'

    def test_json_round_trip(self):
        model = Scores.model_validate_json('{"values":[9,8,9]}')
        assert model.values.data == (9, 8, 9)
        assert Scores.model_validate_json(model.model_dump_json()) == model

    def test_default(self):
        model = Labels()
        assert model.labels.size() == 0

    def test_subclass_element_type(self):
        assert IntContainer.get_element_type() is int

        model = Subclassed(values=["1", 2])
        assert type(model.values) is IntContainer
        assert model.values.data == (1, 2)

        with pytest.raises(ValidationError):
            Subclassed(values=["x"])
