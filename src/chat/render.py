"""Plain-text rendering of chat messages and plugin cards."""

from ..assistant.base import CalculationRecord, DefinitionRecord, Payload, WeatherRecord
from .models import Message, payload_from_data


def _weather_card(record: WeatherRecord) -> str:
    return "\n".join(
        [
            f"Weather in {record.location}",
            f"  {record.temperature_celsius}°C, {record.condition_text}",
            f"  Humidity: {record.humidity_percent}%",
            f"  Wind: {record.wind_speed_kph} km/h",
        ]
    )


def _calculation_card(record: CalculationRecord) -> str:
    result = record.result
    if isinstance(result, int):
        shown = f"{result:,}"
    elif isinstance(result, float):
        # At most three fractional digits.
        shown = f"{result:,.3f}".rstrip("0").rstrip(".")
    else:
        shown = str(result)
    return f"Calculator\n  Expression: {record.expression_text}\n  Result: {shown}"


def _definition_card(record: DefinitionRecord) -> str:
    header = record.word
    if record.pronunciation:
        header += f" {record.pronunciation}"
    lines = [header]
    for sense in record.senses:
        lines.append(f"  ({sense.part_of_speech}) {sense.definition}")
        if sense.example:
            lines.append(f'    "{sense.example}"')
    return "\n".join(lines)


def render_payload(payload: Payload) -> str:
    """Render a plugin payload as a text card."""
    if isinstance(payload, WeatherRecord):
        return _weather_card(payload)
    if isinstance(payload, CalculationRecord):
        return _calculation_card(payload)
    if isinstance(payload, DefinitionRecord):
        return _definition_card(payload)
    raise TypeError(f"Unsupported payload: {type(payload).__name__}")


def render_message(message: Message) -> str:
    """Render a stored message for the terminal."""
    if message.type == "plugin" and message.plugin_data is not None:
        try:
            return render_payload(payload_from_data(message.plugin_data))
        except (TypeError, ValueError):
            return f"Unknown plugin: {message.plugin_name}"
    return message.content
