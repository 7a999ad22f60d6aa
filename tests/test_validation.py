# =============================================================================
# tests/test_validation.py - Validator Tests
# =============================================================================

import pytest

from clientes_api.app.services.validation import (
    EMAIL_INVALIDO,
    EMAIL_MUITO_LONGO,
    EMAIL_OBRIGATORIO,
    NOME_MUITO_LONGO,
    NOME_OBRIGATORIO,
    Invalid,
    Valid,
    normalize_email,
    validate_cliente,
)


class TestValidCliente:
    """Inputs that pass validation."""

    def test_returns_trimmed_name_and_normalized_email(self):
        result = validate_cliente("  Carlos Silva ", " Carlos@EMAIL.com ")

        assert result == Valid(nome="Carlos Silva", email="carlos@email.com")

    def test_inner_whitespace_in_name_is_kept(self):
        result = validate_cliente("Ana  Maria", "ana@email.com")

        assert isinstance(result, Valid)
        assert result.nome == "Ana  Maria"

    def test_name_at_max_length_is_accepted(self):
        result = validate_cliente("a" * 200, "a@email.com")

        assert isinstance(result, Valid)

    @pytest.mark.parametrize("email", [
        "carlos@email.com",
        "carlos.silva+tag@mail.example.com.br",
        "CARLOS@EMAIL.COM",
    ])
    def test_accepted_email_shapes(self, email):
        assert isinstance(validate_cliente("Carlos", email), Valid)


class TestInvalidCliente:
    """Inputs that fail validation."""

    @pytest.mark.parametrize("nome", ["", "   ", "\t\n", None])
    def test_blank_name_is_required(self, nome):
        result = validate_cliente(nome, "carlos@email.com")

        assert result == Invalid(errors={"nome": [NOME_OBRIGATORIO]})

    @pytest.mark.parametrize("email", ["", "   ", None])
    def test_blank_email_is_required(self, email):
        result = validate_cliente("Carlos", email)

        assert result == Invalid(errors={"email": [EMAIL_OBRIGATORIO]})

    @pytest.mark.parametrize("email", [
        "invalido",
        "carlos@",
        "@email.com",
        "carlos@email",
        "carlos@@email.com",
        "carlos silva@email.com",
    ])
    def test_malformed_email_is_invalid(self, email):
        result = validate_cliente("Carlos", email)

        assert result == Invalid(errors={"email": [EMAIL_INVALIDO]})

    def test_errors_accumulate_across_fields(self):
        result = validate_cliente("", "")

        assert isinstance(result, Invalid)
        assert result.errors == {
            "nome": [NOME_OBRIGATORIO],
            "email": [EMAIL_OBRIGATORIO],
        }

    def test_blank_name_and_malformed_email(self):
        result = validate_cliente(" ", "invalido")

        assert result.errors == {
            "nome": [NOME_OBRIGATORIO],
            "email": [EMAIL_INVALIDO],
        }

    def test_email_reports_a_single_cause(self):
        # Whitespace-only is "required", never also "invalid".
        result = validate_cliente("Carlos", "    ")

        assert result.errors["email"] == [EMAIL_OBRIGATORIO]

    def test_name_too_long(self):
        result = validate_cliente("a" * 201, "carlos@email.com")

        assert result == Invalid(errors={"nome": [NOME_MUITO_LONGO]})

    def test_email_too_long(self):
        email = "a" * 191 + "@email.com"

        result = validate_cliente("Carlos", email)

        assert result == Invalid(errors={"email": [EMAIL_MUITO_LONGO]})

    def test_email_length_is_checked_after_lowercasing(self):
        # "İ".lower() is two code points: 200 raw characters become 201.
        domain = "a" * 60 + "." + "b" * 60 + "." + "c" * 60 + "." + "d" * 11 + ".com"
        email = "İ@" + domain
        assert len(email) == 200

        result = validate_cliente("Carlos", email)

        assert result == Invalid(errors={"email": [EMAIL_MUITO_LONGO]})


def test_normalize_email():
    assert normalize_email(" Carlos@EMAIL.com ") == "carlos@email.com"
    assert normalize_email(normalize_email(" Carlos@EMAIL.com ")) == "carlos@email.com"
