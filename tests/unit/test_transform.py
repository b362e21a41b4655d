"""Unit tests for the response envelope and display transformation."""
import pytest

from qrmenu.core.errors import ApiRequestFailedError
from qrmenu.services.menu.base import (
    Category,
    DisplayCategory,
    MenuGroups,
    MenuItem,
)
from qrmenu.services.menu.categories import default_image
from qrmenu.services.menu.envelope import ApiResponse, error_body, unwrap, wrap
from qrmenu.services.menu.transform import (
    transform_menu_groups,
    transform_menu_item,
    transform_menu_items,
)


def make_item(item_id, category=Category.DRINK, is_active=True, image=None):
    """Build a wire-form item for tests."""
    return MenuItem(
        id=item_id,
        name=f"Item {item_id}",
        size="M",
        price="3",
        image=image,
        category=category,
        is_active=is_active,
    )


class TestUnwrap:
    """Test envelope unwrapping."""

    def test_unwrap_success_dict(self):
        """Test data is returned from a successful envelope."""
        envelope = {
            "success": True,
            "data": {"items": []},
            "message": "OK",
            "timestamp": "2024-01-01T00:00:00Z",
        }
        assert unwrap(envelope) == {"items": []}

    def test_unwrap_success_model(self):
        """Test ApiResponse instances unwrap the same way."""
        assert unwrap(wrap([1, 2, 3])) == [1, 2, 3]

    def test_unwrap_failure_raises_with_message(self):
        """Test a failed envelope raises with its message."""
        envelope = {"success": False, "message": "Menu unavailable", "timestamp": ""}

        with pytest.raises(ApiRequestFailedError) as exc_info:
            unwrap(envelope)

        assert exc_info.value.message == "Menu unavailable"

    def test_unwrap_failure_without_message(self):
        """Test a failed envelope without a message gets a generic one."""
        with pytest.raises(ApiRequestFailedError) as exc_info:
            unwrap(ApiResponse(success=False))

        assert exc_info.value.message == "API request failed"

    def test_unwrap_missing_success_flag_is_failure(self):
        """Test a body without success: true is not trusted."""
        with pytest.raises(ApiRequestFailedError):
            unwrap({"data": {"items": []}})

    def test_wrap_sets_timestamp(self):
        """Test success envelopes are timestamped."""
        envelope = wrap({"a": 1}, "done")

        assert envelope.success is True
        assert envelope.message == "done"
        assert envelope.timestamp

    def test_error_body_shape(self):
        """Test failure bodies carry exactly success, message and timestamp."""
        body = error_body("Menu item not found")

        assert set(body) == {"success", "message", "timestamp"}
        assert body["success"] is False
        assert body["message"] == "Menu item not found"


class TestTransformMenuItems:
    """Test wire-to-display item transformation."""

    def test_transform_item(self):
        """Test fields are copied and category lowercased."""
        item = make_item(1, Category.FOOD_SET, image="https://example.com/set.jpg")

        display = transform_menu_item(item)

        assert display.id == 1
        assert display.name == "Item 1"
        assert display.size == "M"
        assert display.price == "3"
        assert display.image == "https://example.com/set.jpg"
        assert display.category is DisplayCategory.FOOD_SET

    @pytest.mark.parametrize("image", [None, "", "   "])
    def test_blank_image_uses_category_default(self, image):
        """Test missing images are replaced by the category placeholder."""
        display = transform_menu_item(make_item(1, Category.FOOD, image=image))

        assert display.image == default_image(Category.FOOD)

    def test_inactive_items_filtered(self):
        """Test inactive items never reach the display list."""
        items = [
            make_item(1),
            make_item(2, is_active=False),
            make_item(3, Category.FOOD),
        ]

        display = transform_menu_items(items)

        assert [item.id for item in display] == [1, 3]
        assert all(item.is_active for item in display)

    def test_order_preserved(self):
        """Test relative order of active items is kept, not re-sorted."""
        items = [
            make_item(9, Category.FOOD),
            make_item(2, is_active=False),
            make_item(5, Category.FOOD_SET),
            make_item(1),
        ]

        assert [item.id for item in transform_menu_items(items)] == [9, 5, 1]

    def test_empty_input(self):
        """Test empty input gives empty output."""
        assert transform_menu_items([]) == []

    def test_all_inactive(self):
        """Test a menu with only inactive items displays nothing."""
        items = [make_item(1, is_active=False), make_item(2, is_active=False)]

        assert transform_menu_items(items) == []

    def test_input_not_modified(self):
        """Test the transformation leaves its input untouched."""
        items = [make_item(1, image=None), make_item(2, is_active=False)]

        transform_menu_items(items)

        assert items[0].image is None
        assert items[0].category is Category.DRINK
        assert len(items) == 2

    def test_transform_groups(self):
        """Test each bucket of a separated menu is transformed."""
        groups = MenuGroups(
            drinks=[make_item(1), make_item(2, is_active=False)],
            foods=[make_item(3, Category.FOOD)],
            food_sets=[make_item(4, Category.FOOD_SET)],
        )

        display = transform_menu_groups(groups)

        assert [item.id for item in display.drinks] == [1]
        assert [item.id for item in display.foods] == [3]
        assert [item.id for item in display.food_sets] == [4]
        assert display.food_sets[0].category is DisplayCategory.FOOD_SET
