"""Prompt text for the weather assistant."""

from __future__ import annotations

from ..weather.models import WeatherSnapshot

OFF_TOPIC_REFUSAL = "Sorry, I am just a weather Assistant powered by Google"
FALLBACK_REPLY = (
    "I'm sorry, I'm having trouble providing advice right now. Please try again later."
)
EMPTY_CONVERSATION_REPLY = "I need some context to start."

SURF_WIND_THRESHOLD_KMH = 25

SYSTEM_INSTRUCTION = (
    "You are a helpful and friendly AI weather assistant. Your knowledge is strictly "
    "limited to interpreting the provided weather data (given in the first user message) "
    "to help users plan their day. You can suggest clothing, recommend activities, and "
    "discuss surfing feasibility if applicable. If the user asks a question that is not "
    "related to weather, planning the day, or activities based on the weather, you must "
    f"respond with the exact phrase: '{OFF_TOPIC_REFUSAL}' and nothing else."
)

KNOWN_LANDLOCKED_CITIES = frozenset(
    {
        "addis ababa",
        "berlin",
        "bern",
        "budapest",
        "calgary",
        "denver",
        "johannesburg",
        "kabul",
        "kathmandu",
        "la paz",
        "las vegas",
        "madrid",
        "mexico city",
        "moscow",
        "nairobi",
        "paris",
        "phoenix",
        "prague",
        "salt lake city",
        "ulaanbaatar",
        "vienna",
        "zurich",
    }
)


def is_known_landlocked(city: str) -> bool:
    return city.strip().lower() in KNOWN_LANDLOCKED_CITIES


def build_initial_prompt(snapshot: WeatherSnapshot) -> str:
    """Render the hidden first user turn that seeds the conversation.

    The surfing point is left out for cities known to be landlocked; for
    every other city the model decides whether the coast is close enough
    for it to matter.
    """
    instructions = [
        "Give a general summary of the day's weather.",
        "Suggest appropriate clothing.",
        "Recommend a couple of suitable outdoor or indoor activities.",
    ]
    if not is_known_landlocked(snapshot.city):
        instructions.append(
            "If the city is known to be coastal (like Honolulu, Sydney, Miami, etc.) or the "
            "weather suggests a beach day, provide specific advice on the feasibility and "
            "safety of surfing today. Consider the wind speed and general weather "
            f"conditions. For example, high winds (>{SURF_WIND_THRESHOLD_KMH} km/h) might be "
            "for experts only or unsafe. Calm, sunny weather might be good for beginners. "
            "If the city is landlocked, ignore this point."
        )
    numbered = "\n".join(f"{index}. {text}" for index, text in enumerate(instructions, start=1))

    return (
        f"Based on the following weather data for {snapshot.city}, provide a concise and "
        "actionable plan for the day. The advice should be easy to read, using short "
        "paragraphs or bullet points.\n"
        "\n"
        "Weather Data:\n"
        f"- Temperature: {snapshot.temperature}°C\n"
        f"- Feels Like: {snapshot.feels_like}°C\n"
        f"- Condition: {snapshot.condition}\n"
        f"- Humidity: {snapshot.humidity}%\n"
        f"- Wind Speed: {snapshot.wind_speed} km/h\n"
        f"- Pressure: {snapshot.pressure} hPa\n"
        f"- Visibility: {snapshot.visibility} km\n"
        f"- Sunrise: {snapshot.sunrise}\n"
        f"- Sunset: {snapshot.sunset}\n"
        f"- UV Index: {snapshot.uv_index}\n"
        "\n"
        "Your response should:\n"
        f"{numbered}\n"
    )
