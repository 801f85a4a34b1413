"""Dutch question templates asked to every AI provider during a scan."""

MAX_QUESTIONS = 50


def _templates(name: str, category: str, city: str) -> list[str]:
    return [
        # Direct brand queries
        f"Is {name} een goede keuze voor {category} in {city}?",
        f"Wat zijn de ervaringen met {name}?",
        f"Hoe betrouwbaar is {name}?",
        f"Is {name} aan te bevelen?",
        f"Wat vinden klanten van {name}?",

        # Category discovery
        f"Welk {category} bedrijf is het beste in {city}?",
        f"Wat zijn de top {category} bedrijven in {city}?",
        f"Welke {category} bedrijven worden het meest aanbevolen in {city}?",
        f"Goede {category} bedrijven in {city}?",
        f"Beste {category} in Nederland?",

        # Comparisons
        f"Vergelijk de beste {category} bedrijven in {city}",
        f"Wat zijn de voor- en nadelen van {name}?",
        f"Alternatieven voor {name} in {category}?",
        f"Is {name} beter dan de concurrentie?",
        f"Hoe onderscheidt {name} zich van anderen?",

        # Trust & authority
        f"Hoeveel jaar is {name} actief?",
        f"Heeft {name} certificeringen of awards?",
        f"Waar staat {name} voor?",
        f"Wat is de specialisatie van {name}?",
        f"Is {name} lid van een branchevereniging?",

        # Local variants
        f"{category} bedrijf {city} aanbeveling",
        f"Beste {category} in de regio {city}",
        f"Top {category} bedrijven in en rond {city}",
        f"{category} specialist in {city} centrum",
        f"Betrouwbare {category} dichtbij {city}",

        # Intent-based
        f"Ik wil samenwerken met een {category} bedrijf in {city}, wie raad je aan?",
        f"Waar kan ik terecht voor professioneel {category} in {city}?",
        f"{category} bedrijf met goede reviews in {city}",
        f"Professioneel {category} team {city}",
        f"Ervaren {category} specialist {city}",

        # AI popularity
        f"Welke {category} bedrijven noemen AI-assistenten het meest?",
        f"Populaire {category} merken in Nederland",
        f"Innovatief {category} bedrijf {city}",
        f"{category} met duurzame aanpak {city}",
        f"Wie zijn de marktleiders in {category} in {city}?",

        # Social proof
        f"Klantbeoordelingen {name}",
        f"Case studies {name}",
        f"Resultaten {name}",
        f"Succesverhalen {category} {city}",
        f"{category} bedrijf met hoogste klanttevredenheid in {city}",

        # Use cases
        f"Voor welk type klant is {name} het meest geschikt?",
        f"Kleine bedrijven {category} {city}",
        f"MKB {category} oplossingen {city}",
        f"Enterprise {category} {city}",
        f"Startup-vriendelijk {category} {city}",

        # Urgency & price
        f"Snelste {category} bedrijf {city}",
        f"{category} bedrijf in {city} dat 24/7 bereikbaar is",
        f"Wat zijn de prijzen voor {category} diensten in {city}?",
        f"{category} op maat {city}",
        f"Betaalbaar {category} {city}",
    ]


def generate_questions(name: str, category: str, city: str, count: int = MAX_QUESTIONS) -> list[str]:
    """
    Build the ordered question set for a business.

    Args:
        name: Business name
        category: Business category, e.g. "Bakkerij"
        city: City the business operates in
        count: Number of questions wanted; capped at MAX_QUESTIONS

    Returns:
        The first ``count`` questions. The same inputs always give the
        same list in the same order.
    """
    if count <= 0:
        return []
    return _templates(name, category, city)[:min(count, MAX_QUESTIONS)]
