"""Tests for transaction validation."""
import copy
import pytest
from decimal import Decimal

from finance_tracker.validators import validate, ErrorCode


def with_field(candidate, name, value):
    """Copy of candidate with one field replaced."""
    updated = dict(candidate)
    updated[name] = value
    return updated


class TestAcceptance:
    """Test well-formed candidates."""

    def test_lunch_is_accepted(self, valid_candidate):
        """Test the reference valid expense."""
        result = validate(valid_candidate)

        assert result.accepted is True
        assert result.errors == {}

    def test_income_category_accepted_for_income(self, valid_candidate):
        """Test income categories with income type."""
        candidate = with_field(valid_candidate, 'type', 'income')
        candidate['category'] = 'Salary'
        candidate['description'] = 'Monthly salary'

        assert validate(candidate).accepted

    def test_other_allowed_for_both_types(self, valid_candidate):
        """Test Other belongs to both category sets."""
        assert validate(with_field(valid_candidate, 'category', 'Other')).accepted
        income = with_field(valid_candidate, 'type', 'income')
        assert validate(with_field(income, 'category', 'Other')).accepted

    def test_accented_letters_allowed(self, valid_candidate):
        """Test accented Latin letters in description."""
        assert validate(with_field(valid_candidate, 'description', 'Café crème')).accepted

    def test_loose_day_of_month_accepted(self, valid_candidate):
        """Test impossible calendar days within 01-31 pass."""
        assert validate(with_field(valid_candidate, 'date', '2025-02-31')).accepted

    def test_numeric_amount_accepted(self, valid_candidate):
        """Test legacy numeric amounts."""
        assert validate(with_field(valid_candidate, 'amount', 12.5)).accepted
        assert validate(with_field(valid_candidate, 'amount', 7)).accepted
        assert validate(with_field(valid_candidate, 'amount', Decimal("3.20"))).accepted

    def test_validation_does_not_mutate_input(self, valid_candidate):
        """Test validate is query-only."""
        before = copy.deepcopy(valid_candidate)

        first = validate(valid_candidate)
        second = validate(valid_candidate)

        assert valid_candidate == before
        assert first.to_dict() == second.to_dict()


class TestRequiredFields:
    """Test missing fields."""

    @pytest.mark.parametrize("field_name", ['description', 'amount', 'date', 'category', 'type'])
    def test_missing_field_rejected(self, valid_candidate, field_name):
        """Test each required field."""
        candidate = dict(valid_candidate)
        del candidate[field_name]

        result = validate(candidate)

        assert result.accepted is False
        assert result.errors[field_name].code == ErrorCode.EMPTY_FIELD

    @pytest.mark.parametrize("field_name", ['description', 'amount', 'date', 'category', 'type'])
    def test_blank_field_rejected(self, valid_candidate, field_name):
        """Test whitespace-only values count as missing."""
        result = validate(with_field(valid_candidate, field_name, '   '))

        assert result.errors[field_name].code == ErrorCode.EMPTY_FIELD

    def test_all_errors_reported(self):
        """Test every offending field is reported at once."""
        result = validate({})

        assert set(result.errors) == {'description', 'amount', 'date', 'category', 'type'}


class TestDescription:
    """Test description rules."""

    def test_duplicate_word_rejected(self):
        """Test the coffee coffee example."""
        result = validate({
            'description': 'coffee coffee',
            'amount': '5.00',
            'date': '2025-09-25',
            'category': 'Food',
            'type': 'expense',
        })

        assert result.accepted is False
        assert result.errors['description'].code == ErrorCode.DUPLICATE_WORD
        assert set(result.errors) == {'description'}

    def test_duplicate_word_case_insensitive(self, valid_candidate):
        """Test duplicate detection ignores case."""
        result = validate(with_field(valid_candidate, 'description', 'Big Lunch LUNCH'))

        assert result.errors['description'].code == ErrorCode.DUPLICATE_WORD

    def test_word_prefix_is_not_duplicate(self, valid_candidate):
        """Test 'the theater' is not a repeated word."""
        assert validate(with_field(valid_candidate, 'description', 'the theater')).accepted

    def test_non_adjacent_repeat_allowed(self, valid_candidate):
        """Test repeats separated by another word pass."""
        assert validate(with_field(valid_candidate, 'description', 'tea and tea')).accepted

    @pytest.mark.parametrize("text", ['Lunch 2', 'R2D2', '4th street'])
    def test_digits_rejected(self, valid_candidate, text):
        """Test digits anywhere in the description."""
        result = validate(with_field(valid_candidate, 'description', text))

        assert result.errors['description'].code == ErrorCode.FORMAT_ERROR

    @pytest.mark.parametrize("text", [' Lunch', 'Lunch ', 'Big  Lunch', 'Lunch!', 'Big\tLunch', 'fish-and-chips'])
    def test_bad_shape_rejected(self, valid_candidate, text):
        """Test spacing and punctuation rules."""
        result = validate(with_field(valid_candidate, 'description', text))

        assert result.errors['description'].code == ErrorCode.FORMAT_ERROR

    def test_format_checked_before_duplicates(self, valid_candidate):
        """Test only the first failing rule is reported."""
        result = validate(with_field(valid_candidate, 'description', 'coffee  coffee'))

        assert result.errors['description'].code == ErrorCode.FORMAT_ERROR


class TestAmount:
    """Test amount rules."""

    @pytest.mark.parametrize("amount", ['0', '0.5', '0.05', '12', '12.5', '12.50', '1000000'])
    def test_valid_amounts(self, valid_candidate, amount):
        """Test accepted amount shapes."""
        assert validate(with_field(valid_candidate, 'amount', amount)).accepted

    @pytest.mark.parametrize("amount", ['-5', '+5', '01', '00.5', '1,000', '1.', '.5', '1.234', 'abc', '1e3', ' 5'])
    def test_invalid_amounts(self, valid_candidate, amount):
        """Test rejected amount shapes."""
        result = validate(with_field(valid_candidate, 'amount', amount))

        assert result.errors['amount'].code == ErrorCode.FORMAT_ERROR

    def test_negative_number_rejected(self, valid_candidate):
        """Test negative numeric amount."""
        result = validate(with_field(valid_candidate, 'amount', -4.5))

        assert result.errors['amount'].code == ErrorCode.FORMAT_ERROR

    def test_boolean_rejected(self, valid_candidate):
        """Test booleans are not amounts."""
        result = validate(with_field(valid_candidate, 'amount', True))

        assert result.errors['amount'].code == ErrorCode.FORMAT_ERROR


class TestDate:
    """Test date rules."""

    def test_month_thirteen_rejected(self):
        """Test month 13 is a format error."""
        result = validate({
            'description': 'Lunch',
            'amount': '12.50',
            'date': '2025-13-01',
            'category': 'Food',
            'type': 'expense',
        })

        assert result.accepted is False
        assert result.errors['date'].code == ErrorCode.FORMAT_ERROR

    @pytest.mark.parametrize("value", ['2025-00-10', '2025-01-00', '2025-01-32', '25-01-01', '2025/01/01', '2025-1-01', '2025-01-01T10:00'])
    def test_invalid_dates(self, valid_candidate, value):
        """Test rejected date shapes."""
        result = validate(with_field(valid_candidate, 'date', value))

        assert result.errors['date'].code == ErrorCode.FORMAT_ERROR


class TestCategoryAndType:
    """Test enumerated fields."""

    def test_income_category_rejected_for_expense(self, valid_candidate):
        """Test Salary is not an expense category."""
        result = validate(with_field(valid_candidate, 'category', 'Salary'))

        assert result.errors['category'].code == ErrorCode.INVALID_ENUM

    def test_expense_category_rejected_for_income(self, valid_candidate):
        """Test Food is not an income category."""
        result = validate(with_field(valid_candidate, 'type', 'income'))

        assert result.errors['category'].code == ErrorCode.INVALID_ENUM
        assert 'type' not in result.errors

    def test_unknown_category_rejected(self, valid_candidate):
        """Test category outside both sets."""
        result = validate(with_field(valid_candidate, 'category', 'Groceries'))

        assert result.errors['category'].code == ErrorCode.INVALID_ENUM

    def test_category_is_case_sensitive(self, valid_candidate):
        """Test exact category names."""
        result = validate(with_field(valid_candidate, 'category', 'food'))

        assert result.errors['category'].code == ErrorCode.INVALID_ENUM

    @pytest.mark.parametrize("value", ['Expense', 'transfer', 'income '])
    def test_invalid_type(self, valid_candidate, value):
        """Test type must be exactly income or expense."""
        result = validate(with_field(valid_candidate, 'type', value))

        assert result.errors['type'].code == ErrorCode.INVALID_ENUM

    def test_invalid_type_does_not_flag_known_category(self, valid_candidate):
        """Test only the type is reported when the category exists in either set."""
        result = validate(with_field(valid_candidate, 'type', 'transfer'))

        assert set(result.errors) == {'type'}


class TestValidationResult:
    """Test result serialization."""

    def test_to_dict(self, valid_candidate):
        """Test error codes and messages in dictionary form."""
        result = validate(with_field(valid_candidate, 'amount', '-1'))
        data = result.to_dict()

        assert data['accepted'] is False
        assert data['errors']['amount']['code'] == 'FormatError'
        assert data['errors']['amount']['message']
        assert result.messages == {'amount': data['errors']['amount']['message']}
