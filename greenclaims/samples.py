# samples.py
"""Reference marketing texts with known risk profiles.

Used for demos (``python -m greenclaims scan --sample high_risk``) and
as fixtures in the test-suite.
"""

SAMPLE_TEXTS = {
    # several absolute claims: klimaneutral, 100% umweltfreundlich, vollständig nachhaltig
    "high_risk": (
        "Unser klimaneutrales Produkt ist 100% umweltfreundlich und vollständig "
        "nachhaltig hergestellt. Die CO2-freie Produktion erfolgt mit grüner "
        "Energie. Unsere Verpackung ist biologisch abbaubar."
    ),
    # generic claims only, no absolute ones
    "medium_risk": (
        "Wir setzen auf nachhaltige Praktiken und verwenden umweltfreundliche "
        "Materialien. Unser Produkt trägt zur Reduzierung des ökologischen "
        "Fußabdrucks bei."
    ),
    # specific, verifiable claims
    "low_risk": (
        "Hergestellt mit 80% recycelten Materialien (GRS-zertifiziert). "
        "Produktion in Solarenergie-Fabrik (40% Energiebedarf). "
        "Energieeffizienzklasse A+++"
    ),
    "english_high_risk": (
        "Our carbon neutral product is 100% eco-friendly and fully sustainable. "
        "The zero emissions production uses green energy. Our packaging is "
        "completely biodegradable."
    ),
    "mixed": (
        "Unser klimaneutral product is 100% umweltfreundlich. Made with "
        "sustainable materials and completely carbon neutral."
    ),
}


def get_sample(name: str) -> str:
    return SAMPLE_TEXTS[name]
