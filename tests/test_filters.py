"""
Comparison Center - Filter Validation Tests

Tests for:
- Pagination defaults, negative and oversized values
- order_by allow-lists per entity
- Pass-through of name and comparison_id
"""
import pytest

from comparison_center.core.errors import ErrorKind, ValidationError
from comparison_center.core.filters import MAX_PAGINATION_VALUE, validate_order_by, validate_pagination
from comparison_center.features.comparisons.domain import new_comparison_filter
from comparison_center.features.custom_options.domain import new_custom_option_filter
from comparison_center.features.objects.domain import new_object_filter


class TestPagination:
    """Test limit/offset defaults and bounds"""

    def test_absent_values_use_defaults(self):
        """Test None limit and offset become 10 and 0"""
        assert validate_pagination(None, None) == (10, 0)

    def test_zero_limit_means_default(self):
        """Test a zero limit is treated as absent"""
        assert validate_pagination(0, 0) == (10, 0)

    def test_explicit_values_kept(self):
        """Test positive values pass through"""
        assert validate_pagination(25, 50) == (25, 50)

    def test_negative_limit_rejected(self):
        """Test a negative limit is a validation error"""
        with pytest.raises(ValidationError) as exc_info:
            validate_pagination(-1, 0)
        assert exc_info.value.kind == ErrorKind.VALIDATION
        assert exc_info.value.details["field"] == "limit"

    def test_negative_offset_rejected(self):
        """Test a negative offset is a validation error"""
        with pytest.raises(ValidationError):
            validate_pagination(5, -3)

    def test_oversized_limit_rejected(self):
        """Test a limit too large for storage is a validation error"""
        with pytest.raises(ValidationError) as exc_info:
            validate_pagination(10**20, 0)
        assert exc_info.value.details["field"] == "limit"

    def test_oversized_offset_rejected(self):
        """Test an offset too large for storage is a validation error"""
        with pytest.raises(ValidationError) as exc_info:
            validate_pagination(5, 10**20)
        assert exc_info.value.details["field"] == "offset"

    def test_largest_storable_value_accepted(self):
        """Test MAX_PAGINATION_VALUE itself passes"""
        assert validate_pagination(MAX_PAGINATION_VALUE, MAX_PAGINATION_VALUE) == (MAX_PAGINATION_VALUE, MAX_PAGINATION_VALUE)


class TestOrderBy:
    """Test order_by defaulting and allow-lists"""

    def test_empty_defaults_to_created_at(self):
        """Test empty and None order_by default to created_at"""
        assert validate_order_by("", {"created_at"}) == "created_at"
        assert validate_order_by(None, {"created_at"}) == "created_at"

    def test_unknown_field_rejected(self):
        """Test a field outside the allow-list is rejected"""
        with pytest.raises(ValidationError):
            validate_order_by("password", {"created_at", "name"})

    def test_comparison_only_orders_by_created_at(self):
        """Test comparisons reject ordering by name"""
        assert new_comparison_filter(order_by="created_at").order_by == "created_at"
        with pytest.raises(ValidationError):
            new_comparison_filter(order_by="name")

    @pytest.mark.parametrize("order_by", ["created_at", "name", "rating"])
    def test_object_order_fields(self, order_by):
        """Test every object ordering field is accepted"""
        assert new_object_filter(order_by=order_by).order_by == order_by

    def test_object_order_is_case_sensitive(self):
        """Test order_by must match exactly"""
        with pytest.raises(ValidationError):
            new_object_filter(order_by="Rating")


class TestFilterConstruction:
    """Test the per-entity filter constructors"""

    def test_comparison_filter_defaults(self):
        """Test an empty comparison filter"""
        comparison_filter = new_comparison_filter()
        assert (comparison_filter.limit, comparison_filter.offset, comparison_filter.order_by) == (10, 0, "created_at")

    def test_custom_option_filter_passes_name(self):
        """Test the name substring is kept untouched"""
        custom_option_filter = new_custom_option_filter(5, 2, "Wei")
        assert custom_option_filter.limit == 5
        assert custom_option_filter.offset == 2
        assert custom_option_filter.name == "Wei"

    def test_custom_option_filter_rejects_negative_limit(self):
        """Test custom option filters share pagination checks"""
        with pytest.raises(ValidationError):
            new_custom_option_filter(limit=-10)

    def test_object_filter_passes_name_and_comparison(self):
        """Test name and comparison_id reach the filter unchanged"""
        object_filter = new_object_filter(None, None, "rating", "Lap", "cmp-1")
        assert object_filter.name == "Lap"
        assert object_filter.comparison_id == "cmp-1"
        assert object_filter.limit == 10

    def test_object_filter_none_strings_become_empty(self):
        """Test absent string filters are empty strings"""
        object_filter = new_object_filter()
        assert object_filter.name == ""
        assert object_filter.comparison_id == ""
