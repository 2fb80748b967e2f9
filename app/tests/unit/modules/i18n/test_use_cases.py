"""Tests for modules.i18n.core.use_cases."""

import pytest

from modules.i18n.core.use_cases import GetCurrentLocaleUseCase, SwitchLocaleUseCase
from modules.i18n.domain.errors import InvalidLocaleError
from modules.i18n.domain.models import LocaleCode


@pytest.mark.unit
class TestGetCurrentLocaleUseCase:
    def test_delegates_to_repository(self, mock_repository):
        mock_repository.get_current_locale.return_value = LocaleCode.TH

        assert GetCurrentLocaleUseCase(mock_repository).execute() is LocaleCode.TH


@pytest.mark.unit
class TestSwitchLocaleUseCase:
    def test_valid_locale_navigates(self, mock_repository):
        SwitchLocaleUseCase(mock_repository).execute("th")

        mock_repository.set_locale.assert_called_once_with(LocaleCode.TH)

    def test_accepts_enum_member(self, mock_repository):
        SwitchLocaleUseCase(mock_repository).execute(LocaleCode.EN)

        mock_repository.set_locale.assert_called_once_with(LocaleCode.EN)

    @pytest.mark.parametrize("requested", ["xx", "", "EN", "en-US", None])
    def test_invalid_locale_raises_without_navigation(self, mock_repository, requested):
        with pytest.raises(InvalidLocaleError) as exc_info:
            SwitchLocaleUseCase(mock_repository).execute(requested)

        assert exc_info.value.locale == requested
        mock_repository.set_locale.assert_not_called()

    def test_error_message_names_rejected_value(self, mock_repository):
        with pytest.raises(InvalidLocaleError, match="Invalid locale: xx"):
            SwitchLocaleUseCase(mock_repository).execute("xx")

    def test_switch_to_current_locale_still_navigates(self, mock_repository):
        mock_repository.get_current_locale.return_value = LocaleCode.EN
        use_case = SwitchLocaleUseCase(mock_repository)

        use_case.execute("en")
        use_case.execute("en")

        assert mock_repository.set_locale.call_count == 2
