"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and consistent, and documents every error case.
    """

    # ------------------------------------------------------------------
    # Reference errors
    # ------------------------------------------------------------------

    @staticmethod
    def unsupported_locale(locale_code: str) -> Diagnostic:
        """Locale has no message table at all.

        Args:
            locale_code: The locale that was requested

        Returns:
            Diagnostic for UNSUPPORTED_LOCALE
        """
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_LOCALE,
            message=f"Unsupported locale '{locale_code}'",
            hint="Resolve the requested locale with lookup_locale() or register its data first",
            locale_code=locale_code,
        )

    @staticmethod
    def message_not_found(message_id: str, locale_code: str) -> Diagnostic:
        """No template for an id and no fallback text on the reference.

        Args:
            message_id: The message id that was looked up
            locale_code: The destination locale

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=f"ICU message not found in destination locale: '{message_id}'",
            hint="Add the message to the locale data or create the reference with its UI string",
            message_id=message_id,
            locale_code=locale_code,
        )

    @staticmethod
    def unknown_message(ui_string: str) -> Diagnostic:
        """A UI string is not present in a module's merged string table.

        Args:
            ui_string: The literal that could not be located

        Returns:
            Diagnostic for UNKNOWN_MESSAGE
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_MESSAGE,
            message=f"Could not locate: {ui_string}",
            hint="Pass the exact string from the module's UI strings table",
        )

    @staticmethod
    def stale_translation(message_id: str, default_locale: str) -> Diagnostic:
        """Fallback UI string differs from the default locale's message.

        Args:
            message_id: The message id whose text is out of date
            default_locale: Locale the fallback text was compared with

        Returns:
            Warning diagnostic for STALE_TRANSLATION
        """
        return Diagnostic(
            code=DiagnosticCode.STALE_TRANSLATION,
            message=(
                f"Message '{message_id}' does not match its '{default_locale}' counterpart"
            ),
            hint="Regenerate the locale data from the UI strings tables",
            message_id=message_id,
            severity="warning",
        )

    # ------------------------------------------------------------------
    # Value errors
    # ------------------------------------------------------------------

    @staticmethod
    def missing_value(icu_message: str, placeholder: str) -> Diagnostic:
        """Placeholder in the template has no supplied value.

        Args:
            icu_message: Template text (for context)
            placeholder: The placeholder name without a value

        Returns:
            Diagnostic for MISSING_VALUE
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_VALUE,
            message=(
                f'ICU Message "{icu_message}" contains a value reference ("{placeholder}") '
                "that wasn't provided"
            ),
            hint="Pass a value for every placeholder in the message",
            message_id=icu_message,
            placeholder=placeholder,
        )

    @staticmethod
    def type_mismatch(icu_message: str, placeholder: str, received: object) -> Diagnostic:
        """Numeric placeholder received a non-numeric value.

        Args:
            icu_message: Template text (for context)
            placeholder: The numeric placeholder name
            received: The value that was supplied

        Returns:
            Diagnostic for TYPE_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.TYPE_MISMATCH,
            message=(
                f'ICU Message "{icu_message}" contains a numeric reference ("{placeholder}") '
                "but provided value was not a number"
            ),
            hint=f"Convert the {type(received).__name__} value to int or float first",
            message_id=icu_message,
            placeholder=placeholder,
        )

    @staticmethod
    def unused_value(icu_message: str, value_id: str) -> Diagnostic:
        """Supplied value matches no placeholder.

        Args:
            icu_message: Template text (for context)
            value_id: The supplied key with no placeholder

        Returns:
            Diagnostic for UNUSED_VALUE
        """
        return Diagnostic(
            code=DiagnosticCode.UNUSED_VALUE,
            message=(
                f'Provided value "{value_id}" does not match any placeholder in '
                f'ICU message "{icu_message}"'
            ),
            hint="Remove the value or add the placeholder to the message",
            message_id=icu_message,
            placeholder=value_id,
        )

    # ------------------------------------------------------------------
    # Syntax errors
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_eof(position: int, span: SourceSpan | None = None) -> Diagnostic:
        """Template ended inside an argument or quoted literal.

        Args:
            position: Character offset where input ended

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=f"Unexpected EOF at position {position}",
            span=span,
            hint="Check for an unclosed '{' or quote",
        )

    @staticmethod
    def unexpected_character(
        found: str, expected: str, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Parser found a character it cannot accept here.

        Args:
            found: The offending character
            expected: Description of what was expected

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=f"Expected {expected} but found '{found}'",
            span=span,
        )

    @staticmethod
    def unsupported_argument_type(
        argument_type: str, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Argument type keyword is not number, plural, selectordinal or select."""
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_ARGUMENT_TYPE,
            message=f"Unsupported argument type '{argument_type}'",
            span=span,
            hint="Use one of: number, plural, selectordinal, select",
        )

    @staticmethod
    def missing_other_option(placeholder: str, span: SourceSpan | None = None) -> Diagnostic:
        """Plural or select argument lacks the mandatory 'other' option."""
        return Diagnostic(
            code=DiagnosticCode.MISSING_OTHER_OPTION,
            message=f"Argument '{placeholder}' has no 'other' option",
            span=span,
            placeholder=placeholder,
            hint="Add an other{...} branch",
        )

    @staticmethod
    def duplicate_option(
        key: str, placeholder: str, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Plural or select argument repeats an option key."""
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_OPTION,
            message=f"Duplicate option '{key}' in argument '{placeholder}'",
            span=span,
            placeholder=placeholder,
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, span: SourceSpan | None = None) -> Diagnostic:
        """Template nests plural/select branches beyond the depth limit."""
        return Diagnostic(
            code=DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED,
            message=f"Maximum nesting depth ({max_depth}) exceeded",
            span=span,
        )

    # ------------------------------------------------------------------
    # Formatting errors
    # ------------------------------------------------------------------

    @staticmethod
    def formatting_failed(value: object, locale_code: str, error: str) -> Diagnostic:
        """Babel failed to render a number."""
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=f"Number formatting failed for '{value}': {error}",
            locale_code=locale_code,
        )

    @staticmethod
    def path_encoding(property_name: str) -> Diagnostic:
        """Property name cannot be rendered unambiguously as a path segment.

        Args:
            property_name: The offending property name

        Returns:
            Diagnostic for PATH_ENCODING
        """
        return Diagnostic(
            code=DiagnosticCode.PATH_ENCODING,
            message=f'Cannot handle "{property_name}" in i18n',
            hint="Property names may not contain ']', quotes or whitespace",
        )

    @staticmethod
    def invalid_input_type(received: object) -> Diagnostic:
        """get_formatted() received neither a message reference nor a string."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_INPUT_TYPE,
            message=f"Invalid type passed in: {type(received).__name__}",
            hint="Pass an IcuMessage (or its dict form) or a plain string",
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Document or AST nesting exceeded the depth guard."""
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=f"Maximum depth ({max_depth}) exceeded",
            hint="The structure may be cyclic",
        )

    @staticmethod
    def cyclic_document(depth: int) -> Diagnostic:
        """A container was reached again from inside itself."""
        return Diagnostic(
            code=DiagnosticCode.CYCLIC_DOCUMENT,
            message=f"Document contains itself at depth {depth}",
            hint="Localized documents must be trees",
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def validation_parse_error(
        locale_code: str, message_id: str, error: str
    ) -> Diagnostic:
        """Locale template failed to parse."""
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_PARSE_ERROR,
            message=f"[{locale_code}] '{message_id}' does not parse: {error}",
            message_id=message_id,
            locale_code=locale_code,
        )

    @staticmethod
    def validation_placeholder_mismatch(
        locale_code: str,
        message_id: str,
        expected: frozenset[str],
        found: frozenset[str],
    ) -> Diagnostic:
        """Translated template uses different placeholders than the default locale."""
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_PLACEHOLDER_MISMATCH,
            message=(
                f"[{locale_code}] '{message_id}' uses placeholders {sorted(found)}, "
                f"expected {sorted(expected)}"
            ),
            message_id=message_id,
            locale_code=locale_code,
        )

    @staticmethod
    def validation_unknown_id(locale_code: str, message_id: str) -> Diagnostic:
        """Translated id is absent from the default locale."""
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_UNKNOWN_ID,
            message=f"[{locale_code}] '{message_id}' is not in the default locale",
            message_id=message_id,
            locale_code=locale_code,
            severity="warning",
        )

    @staticmethod
    def validation_missing_default_locale(default_locale: str) -> Diagnostic:
        """Store has no table for the default locale."""
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_MISSING_DEFAULT_LOCALE,
            message=f"No data registered for default locale '{default_locale}'",
            locale_code=default_locale,
            severity="warning",
        )
