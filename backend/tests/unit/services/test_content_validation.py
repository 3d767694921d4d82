import pytest
from todo_api.services._shared.errors import EMPTY_CONTENT_MESSAGE, ValidationError
from todo_api.services.todos.validation import validate_content


class TestValidateContent:
    """Only emptiness is rejected; everything else passes verbatim."""

    @pytest.mark.parametrize("content", [None, "", " ", "\t\n  "])
    def test_rejects_empty_content(self, content):
        """Given missing or blank content, a ValidationError('empty') is raised."""
        with pytest.raises(ValidationError) as info:
            validate_content(content)

        assert info.value.reason == "empty"
        assert str(info.value) == EMPTY_CONTENT_MESSAGE

    def test_keeps_surrounding_whitespace(self):
        """Accepted content is returned untrimmed."""
        assert validate_content("  buy milk ") == "  buy milk "

    def test_accepts_sql_metacharacters(self):
        """A string resembling a destructive statement is ordinary content."""
        payload = "'); DROP TABLE todos; --"

        assert validate_content(payload) == payload
