# terms.py
"""Corpus of regulated green-claim terms.

Each entry couples a display name with a compiled, case-insensitive
pattern and the static metadata needed to explain a finding: severity,
category, the citation in Directive (EU) 2024/825, an informational
penalty range and a list of compliant rewrites.

The corpus is built once at import time and never mutated.  German and
English entries go through the same :func:`make_term` builder; the
patterns are written per language because their morphology differs
(German adjective endings, English ``-ity``/``-ly`` forms, optional
hyphenation in compounds such as ``eco-friendly``).

Additional terms can be supplied as a YAML list, see
:func:`load_terms_from_yaml`.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Iterable, Optional

import yaml

from .errors import TermLoadError

logger = logging.getLogger(__name__)

SEVERITIES = ("critical", "warning", "minor")
LANGUAGES = ("de", "en", "both")
CATEGORIES = ("climate", "general", "recycling", "energy", "resources")

# Default penalty descriptors, keyed by (severity, language)
PENALTY_RANGES = {
    ("critical", "de"): "4-10% des Jahresumsatzes",
    ("critical", "en"): "4-10% of annual turnover",
    ("warning", "de"): "2-4% des Jahresumsatzes",
    ("warning", "en"): "2-4% of annual turnover",
    ("minor", "de"): "bis zu 2% des Jahresumsatzes",
    ("minor", "en"): "up to 2% of annual turnover",
}

# German adjective endings: klimaneutral, klimaneutrale, -en, -er, -es, -em
DE_ADJ = r"(?:e[mnrs]?)?"
# "100%", "100 %" or a bare "100"
HUNDRED = r"100\s*%?"


@dataclass(frozen=True)
class TermDefinition:
    """One regulated phrase together with its compiled pattern."""

    term: str
    pattern: re.Pattern
    language: str
    category: str
    severity: str
    regulation: str
    penalty_range: str
    description: str
    alternatives: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "term": self.term,
            "pattern": self.pattern.pattern,
            "language": self.language,
            "category": self.category,
            "severity": self.severity,
            "regulation": self.regulation,
            "penaltyRange": self.penalty_range,
            "description": self.description,
            "alternatives": list(self.alternatives),
        }


def make_term(
    term: str,
    regex: str,
    *,
    language: str,
    category: str,
    severity: str,
    regulation: str,
    description: str,
    alternatives: Iterable[str] = (),
    penalty_range: Optional[str] = None,
) -> TermDefinition:
    """Compile ``regex`` and wrap it into a :class:`TermDefinition`.

    ``penalty_range`` defaults to the descriptor for the term's severity
    in its language (English for language-agnostic terms).
    """
    if severity not in SEVERITIES:
        raise ValueError(f"Unknown severity {severity!r} for term {term!r}")
    if language not in LANGUAGES:
        raise ValueError(f"Unknown language {language!r} for term {term!r}")
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category {category!r} for term {term!r}")
    if penalty_range is None:
        penalty_range = PENALTY_RANGES[(severity, "de" if language == "de" else "en")]
    return TermDefinition(
        term=term,
        pattern=re.compile(regex, re.IGNORECASE),
        language=language,
        category=category,
        severity=severity,
        regulation=regulation,
        penalty_range=penalty_range,
        description=description,
        alternatives=tuple(alternatives),
    )


ART_3_1 = "EU 2024/825 Art. 3.1"
ART_3_2 = "EU 2024/825 Art. 3.2"
ART_3_3 = "EU 2024/825 Art. 3.3"
ART_3_4 = "EU 2024/825 Art. 3.4"
ART_4_1 = "EU 2024/825 Art. 4.1"
ART_4_2 = "EU 2024/825 Art. 4.2"
ART_4_3 = "EU 2024/825 Art. 4.3"
ART_5_1 = "EU 2024/825 Art. 5.1"


BANNED_TERMS: tuple[TermDefinition, ...] = (
    # ---- critical, German ----
    make_term(
        "klimaneutral",
        rf"\bklima\s*-?\s*neutral(?:ität|{DE_ADJ})\b",
        language="de", category="climate", severity="critical", regulation=ART_3_1,
        description="Absolute Klimaneutralitäts-Claims erfordern vollständigen Lebenszyklus-Nachweis",
        alternatives=[
            "Reduzierung der CO2-Emissionen um X%",
            "Kompensation durch zertifizierte Klimaschutzprojekte",
            "CO2-reduziert",
        ],
    ),
    make_term(
        "CO2-neutral",
        rf"\bCO[2₂]\s*-?\s*neutral(?:ität|{DE_ADJ})\b|\bkohlenstoffneutral(?:ität|{DE_ADJ})\b",
        language="de", category="climate", severity="critical", regulation=ART_3_1,
        description="CO2-Neutralität erfordert vollständigen Nachweis über den gesamten Lebenszyklus",
        alternatives=[
            "CO2-reduziert",
            "CO2-Kompensation durch zertifizierte Projekte",
            "Reduzierung der CO2-Emissionen",
        ],
    ),
    make_term(
        "100% umweltfreundlich",
        rf"\b(?:{HUNDRED}|vollständig|komplett)\s*umweltfreundlich{DE_ADJ}\b",
        language="de", category="general", severity="critical", regulation=ART_3_2,
        description="Absolute Umweltfreundlichkeits-Claims sind ohne vollständigen Nachweis nicht zulässig",
        alternatives=[
            "Umweltfreundlicher als vergleichbare Produkte",
            "Reduzierte Umweltauswirkungen",
            "Nachhaltigere Alternative",
        ],
    ),
    make_term(
        "vollständig nachhaltig",
        rf"\b(?:vollständig|komplett|{HUNDRED}|total)\s*nachhaltig{DE_ADJ}\b",
        language="de", category="general", severity="critical", regulation=ART_3_2,
        description="Absolute Nachhaltigkeits-Claims erfordern umfassenden Nachweis aller Aspekte",
        alternatives=[
            "Nachhaltiger als vergleichbare Produkte",
            "Nachhaltigkeitsaspekte: [spezifische Angaben]",
            "Teilweise nachhaltig",
        ],
    ),
    make_term(
        "emissionsfrei",
        rf"\bemissionsfrei{DE_ADJ}\b|\b(?:null|keine)\s*emissionen\b",
        language="de", category="climate", severity="critical", regulation=ART_3_1,
        description="Emissionsfreiheit erfordert Nachweis für alle Emissionstypen im gesamten Lebenszyklus",
        alternatives=[
            "Reduzierte Emissionen",
            "Niedrigere Emissionen als [Vergleich]",
            "Emissionsarm",
        ],
    ),
    make_term(
        "klimapositiv",
        rf"\bklima\s*-?\s*positiv{DE_ADJ}\b",
        language="de", category="climate", severity="critical", regulation=ART_3_1,
        description="Klimapositiv-Claims erfordern Nachweis der Netto-Negativ-Emissionen",
        alternatives=[
            "Kompensation von mehr CO2 als produziert",
            "CO2-negativ durch zertifizierte Projekte",
        ],
    ),
    make_term(
        "kohlenstofffrei",
        rf"\bkohlenstofffrei{DE_ADJ}\b|\bcarbon\s*free\b",
        language="de", category="climate", severity="critical", regulation=ART_3_1,
        description="Kohlenstofffreiheit erfordert vollständigen Nachweis über alle Kohlenstoffquellen",
        alternatives=[
            "Kohlenstoffreduziert",
            "Niedrige Kohlenstoffemissionen",
            "CO2-arm",
        ],
    ),
    make_term(
        "100% biologisch abbaubar",
        rf"\b(?:{HUNDRED}|vollständig|komplett)\s*biologisch\s*abbaubar{DE_ADJ}\b",
        language="de", category="recycling", severity="critical", regulation=ART_3_3,
        description="Absolute Abbaubarkeits-Claims erfordern Nachweis unter realen Bedingungen",
        alternatives=[
            "Biologisch abbaubar unter [spezifischen Bedingungen]",
            "Kompostierbar nach [Standard]",
            "Teilweise biologisch abbaubar",
        ],
    ),
    make_term(
        "vollständig recycelbar",
        rf"\b(?:vollständig|{HUNDRED}|komplett|total)\s*recycelbar{DE_ADJ}\b",
        language="de", category="recycling", severity="critical", regulation=ART_3_3,
        description="Absolute Recycelbarkeits-Claims erfordern Nachweis der tatsächlichen Recycling-Infrastruktur",
        alternatives=[
            "Recycelbar wo entsprechende Infrastruktur vorhanden ist",
            "Recycelbar nach [Standard]",
            "Teilweise recycelbar",
        ],
    ),
    make_term(
        "null CO2",
        r"\b(?:null|zero|kein)\s*CO[2₂]\b",
        language="de", category="climate", severity="critical", regulation=ART_3_1,
        description="Null-CO2-Claims erfordern Nachweis für den gesamten Lebenszyklus",
        alternatives=[
            "CO2-reduziert",
            "Niedrige CO2-Emissionen",
            "CO2-Kompensation",
        ],
    ),
    make_term(
        "klimaneutral bis 2025",
        r"\bklimaneutral\s*(?:bis(?:\s*zum)?|in)\s*\d{4}\b",
        language="de", category="climate", severity="critical", regulation=ART_3_1,
        description="Zukunftsversprechen erfordern konkreten, überprüfbaren Plan",
        alternatives=[
            "Ziel: CO2-Reduktion um X% bis [Jahr]",
            "Auf dem Weg zur Klimaneutralität",
            "Klimaneutralitätsplan: [spezifische Maßnahmen]",
        ],
    ),
    make_term(
        "100% erneuerbar",
        rf"\b(?:{HUNDRED}|vollständig|komplett)\s*erneuerbar{DE_ADJ}\b",
        language="de", category="energy", severity="critical", regulation=ART_3_4,
        description="Absolute Erneuerbarkeits-Claims erfordern Nachweis der Energiequelle",
        alternatives=[
            "Erneuerbare Energie aus [Quelle]",
            "X% erneuerbare Energie",
            "Erneuerbare Energie wo verfügbar",
        ],
    ),
    make_term(
        "klimaneutral produziert",
        r"\bklimaneutral\s*(?:produziert|hergestellt|gefertigt)\b",
        language="de", category="climate", severity="critical", regulation=ART_3_1,
        description="Produktions-Claims erfordern Nachweis nur für Produktionsphase, nicht Gesamtlebenszyklus",
        alternatives=[
            "CO2-reduzierte Produktion",
            "Nachhaltigere Produktion",
            "Produktion mit erneuerbaren Energien",
        ],
    ),
    make_term(
        "vollständig kompostierbar",
        rf"\b(?:vollständig|{HUNDRED}|komplett)\s*kompostierbar{DE_ADJ}\b",
        language="de", category="recycling", severity="critical", regulation=ART_3_3,
        description="Kompostierbarkeits-Claims erfordern Nachweis nach EN 13432 oder ähnlichen Standards",
        alternatives=[
            "Kompostierbar nach EN 13432",
            "Kompostierbar unter industriellen Bedingungen",
            "Kompostierbar in [spezifischen] Kompostieranlagen",
        ],
    ),
    make_term(
        "klimaneutral geliefert",
        r"\bklimaneutral\s*(?:geliefert|versendet|transportiert)\b",
        language="de", category="climate", severity="critical", regulation=ART_3_1,
        description="Transport-Claims erfordern Nachweis der Kompensation oder emissionsfreien Transport",
        alternatives=[
            "CO2-kompensierter Versand",
            "Nachhaltiger Versand",
            "Versand mit erneuerbaren Energien",
        ],
    ),
    make_term(
        "netto null",
        r"\bnetto\s*-?\s*null\b",
        language="de", category="climate", severity="critical", regulation=ART_3_1,
        description="Netto-Null-Claims erfordern nachgewiesene Reduktions- und Kompensationsprogramme",
        alternatives=[
            "Auf dem Weg zu Netto-Null-Emissionen bis [Jahr]",
            "Reduzierung der Emissionen um X%",
            "Kompensation durch zertifizierte Klimaschutzprojekte",
        ],
    ),

    # ---- critical, English ----
    make_term(
        "carbon neutral",
        r"\bcarbon\s*-?\s*neutral(?:ity)?\b",
        language="en", category="climate", severity="critical", regulation=ART_3_1,
        description="Absolute carbon neutrality claims require complete lifecycle proof",
        alternatives=[
            "CO2 reduction of X%",
            "Compensation through certified climate protection projects",
            "CO2-reduced",
        ],
    ),
    make_term(
        "climate neutral",
        r"\bclimate\s*-?\s*neutral(?:ity)?\b",
        language="en", category="climate", severity="critical", regulation=ART_3_1,
        description="Absolute climate neutrality claims require complete lifecycle proof",
        alternatives=[
            "CO2 reduction of X%",
            "Climate compensation through certified projects",
            "Reduced climate impact",
        ],
    ),
    make_term(
        "100% eco-friendly",
        rf"\b(?:{HUNDRED}|fully|completely)\s*eco\s*-?\s*friendly\b",
        language="en", category="general", severity="critical", regulation=ART_3_2,
        description="Absolute eco-friendliness claims are not permitted without complete proof",
        alternatives=[
            "More eco-friendly than comparable products",
            "Reduced environmental impact",
            "More sustainable alternative",
        ],
    ),
    make_term(
        "fully sustainable",
        rf"\b(?:fully|completely|{HUNDRED}|totally)\s*sustainable\b",
        language="en", category="general", severity="critical", regulation=ART_3_2,
        description="Absolute sustainability claims require comprehensive proof of all aspects",
        alternatives=[
            "More sustainable than comparable products",
            "Sustainability aspects: [specific details]",
            "Partially sustainable",
        ],
    ),
    make_term(
        "zero emissions",
        r"\b(?:zero|no)\s*emissions\b|\bemission\s*-?\s*free\b",
        language="en", category="climate", severity="critical", regulation=ART_3_1,
        description="Zero emissions claims require proof for all emission types across entire lifecycle",
        alternatives=[
            "Reduced emissions",
            "Lower emissions than [comparison]",
            "Low-emission",
        ],
    ),
    make_term(
        "climate positive",
        r"\b(?:climate\s*-?\s*positive|carbon\s*-?\s*negative|carbon\s*-?\s*positive)\b",
        language="en", category="climate", severity="critical", regulation=ART_3_1,
        description="Climate positive claims require proof of net-negative emissions",
        alternatives=[
            "Compensation of more CO2 than produced",
            "CO2-negative through certified projects",
        ],
    ),
    make_term(
        "carbon free",
        r"\bcarbon\s*-?\s*free\b",
        language="en", category="climate", severity="critical", regulation=ART_3_1,
        description="Carbon-free claims require complete proof across all carbon sources",
        alternatives=[
            "Carbon-reduced",
            "Low carbon emissions",
            "CO2-low",
        ],
    ),
    make_term(
        "100% biodegradable",
        rf"\b(?:{HUNDRED}|fully|completely)\s*biodegradable\b",
        language="en", category="recycling", severity="critical", regulation=ART_3_3,
        description="Absolute biodegradability claims require proof under real conditions",
        alternatives=[
            "Biodegradable under [specific conditions]",
            "Compostable according to [standard]",
            "Partially biodegradable",
        ],
    ),
    make_term(
        "fully recyclable",
        rf"\b(?:fully|{HUNDRED}|completely|totally)\s*recyclable\b",
        language="en", category="recycling", severity="critical", regulation=ART_3_3,
        description="Absolute recyclability claims require proof of actual recycling infrastructure",
        alternatives=[
            "Recyclable where corresponding infrastructure exists",
            "Recyclable according to [standard]",
            "Partially recyclable",
        ],
    ),
    make_term(
        "zero carbon",
        r"\bzero\s*(?:carbon|CO[2₂])\b",
        language="en", category="climate", severity="critical", regulation=ART_3_1,
        description="Zero carbon claims require proof across entire lifecycle",
        alternatives=[
            "Carbon-reduced",
            "Low carbon emissions",
            "Carbon compensation",
        ],
    ),
    make_term(
        "carbon neutral by 2025",
        r"\b(?:carbon|climate)\s*neutral\s*(?:by|before)\s*\d{4}\b",
        language="en", category="climate", severity="critical", regulation=ART_3_1,
        description="Future promises require concrete, verifiable plan",
        alternatives=[
            "Goal: CO2 reduction of X% by [year]",
            "On the path to carbon neutrality",
            "Carbon neutrality plan: [specific measures]",
        ],
    ),
    make_term(
        "100% renewable",
        rf"\b(?:{HUNDRED}|fully|completely)\s*renewable\b",
        language="en", category="energy", severity="critical", regulation=ART_3_4,
        description="Absolute renewable energy claims require proof of energy source",
        alternatives=[
            "Renewable energy from [source]",
            "X% renewable energy",
            "Renewable energy where available",
        ],
    ),
    make_term(
        "carbon neutral production",
        r"\b(?:carbon|climate)\s*neutral\s*production\b",
        language="en", category="climate", severity="critical", regulation=ART_3_1,
        description="Production claims require proof only for production phase, not entire lifecycle",
        alternatives=[
            "CO2-reduced production",
            "More sustainable production",
            "Production with renewable energy",
        ],
    ),
    make_term(
        "fully compostable",
        rf"\b(?:fully|{HUNDRED}|completely)\s*compostable\b",
        language="en", category="recycling", severity="critical", regulation=ART_3_3,
        description="Compostability claims require proof according to EN 13432 or similar standards",
        alternatives=[
            "Compostable according to EN 13432",
            "Compostable under industrial conditions",
            "Compostable in [specific] composting facilities",
        ],
    ),
    make_term(
        "carbon neutral shipping",
        r"\b(?:carbon\s*neutral\s*(?:shipping|delivery)|climate\s*neutral\s*shipping)\b",
        language="en", category="climate", severity="critical", regulation=ART_3_1,
        description="Shipping claims require proof of compensation or emission-free transport",
        alternatives=[
            "CO2-compensated shipping",
            "Sustainable shipping",
            "Shipping with renewable energy",
        ],
    ),
    make_term(
        "net zero",
        r"\bnet\s*-?\s*zero\b",
        language="en", category="climate", severity="critical", regulation=ART_3_1,
        description="Net zero claims require verified reduction and offset programmes",
        alternatives=[
            "On the path to net-zero emissions by [year]",
            "Emissions reduced by X%",
            "Compensation through certified climate protection projects",
        ],
    ),

    # ---- warning ----
    make_term(
        "umweltfreundlich",
        rf"\bumweltfreundlich{DE_ADJ}\b",
        language="de", category="general", severity="warning", regulation=ART_4_1,
        description="Umweltfreundlichkeits-Claims erfordern spezifische Angaben und Nachweise",
        alternatives=[
            "Umweltfreundlicher als [Vergleich]",
            "Reduzierte Umweltauswirkungen in [Bereich]",
            "Nachhaltigere Alternative",
        ],
    ),
    make_term(
        "nachhaltig",
        rf"\bnachhaltig(?:keit|{DE_ADJ})\b",
        language="de", category="general", severity="warning", regulation=ART_4_1,
        description="Nachhaltigkeits-Claims erfordern Spezifizierung der Nachhaltigkeitsaspekte",
        alternatives=[
            "Nachhaltig in [spezifischem Bereich]",
            "Nachhaltigkeitsaspekte: [spezifische Angaben]",
            "Nachhaltiger als [Vergleich]",
        ],
    ),
    make_term(
        "grün",
        rf"\bgrün{DE_ADJ}\b(?!\s*(?:energie|strom|welle))",
        language="de", category="general", severity="warning", regulation=ART_4_1,
        description='Generische "grün"-Claims erfordern Konkretisierung',
        alternatives=[
            "Umweltfreundlich in [Bereich]",
            "Nachhaltig in [Aspekt]",
            "CO2-reduziert",
        ],
    ),
    make_term(
        "öko",
        rf"\b(?:öko|oeko|ökologisch{DE_ADJ})\b",
        language="de", category="general", severity="warning", regulation=ART_4_1,
        description="Öko-Claims erfordern Spezifizierung der ökologischen Aspekte",
        alternatives=[
            "Ökologisch in [spezifischem Bereich]",
            "Umweltfreundlich in [Aspekt]",
            "Nachhaltig in [Bereich]",
        ],
    ),
    make_term(
        "biologisch abbaubar",
        rf"\bbiologisch\s*abbaubar{DE_ADJ}\b",
        language="de", category="recycling", severity="warning", regulation=ART_4_2,
        description="Abbaubarkeits-Claims erfordern Angabe der Bedingungen",
        alternatives=[
            "Biologisch abbaubar unter [Bedingungen]",
            "Kompostierbar nach [Standard]",
            "Abbaubar in [Umgebung]",
        ],
    ),
    make_term(
        "recycelbar",
        rf"\brecycelbar{DE_ADJ}\b",
        language="de", category="recycling", severity="warning", regulation=ART_4_2,
        description="Recycelbarkeits-Claims erfordern Angabe der Verfügbarkeit der Infrastruktur",
        alternatives=[
            "Recycelbar wo Infrastruktur vorhanden ist",
            "Recycelbar nach [Standard]",
            "Recycelbar in [Regionen]",
        ],
    ),
    make_term(
        "eco-friendly",
        r"\b(?:eco\s*-?\s*friendly|environmentally\s*friendly)\b",
        language="en", category="general", severity="warning", regulation=ART_4_1,
        description="Eco-friendly claims require specific details and proof",
        alternatives=[
            "More eco-friendly than [comparison]",
            "Reduced environmental impact in [area]",
            "More sustainable alternative",
        ],
    ),
    make_term(
        "sustainable",
        r"\b(?:sustainable|sustainability)\b(?!\s*development)",
        language="en", category="general", severity="warning", regulation=ART_4_1,
        description="Sustainability claims require specification of sustainability aspects",
        alternatives=[
            "Sustainable in [specific area]",
            "Sustainability aspects: [specific details]",
            "More sustainable than [comparison]",
        ],
    ),
    make_term(
        "green",
        r"\b(?:green|greener|greenest)\b(?!\s*(?:energy|power|wave))",
        language="en", category="general", severity="warning", regulation=ART_4_1,
        description='Generic "green" claims require specification',
        alternatives=[
            "Environmentally friendly in [area]",
            "Sustainable in [aspect]",
            "CO2-reduced",
        ],
    ),
    make_term(
        "eco",
        r"\b(?:eco|ecological|ecologically)\b",
        language="en", category="general", severity="warning", regulation=ART_4_1,
        description="Eco claims require specification of ecological aspects",
        alternatives=[
            "Ecological in [specific area]",
            "Environmentally friendly in [aspect]",
            "Sustainable in [area]",
        ],
    ),
    make_term(
        "biodegradable",
        r"\bbiodegradable\b",
        language="en", category="recycling", severity="warning", regulation=ART_4_2,
        description="Biodegradability claims require specification of conditions",
        alternatives=[
            "Biodegradable under [conditions]",
            "Compostable according to [standard]",
            "Degradable in [environment]",
        ],
    ),
    make_term(
        "recyclable",
        r"\brecycle?able\b",
        language="en", category="recycling", severity="warning", regulation=ART_4_2,
        description="Recyclability claims require specification of infrastructure availability",
        alternatives=[
            "Recyclable where infrastructure exists",
            "Recyclable according to [standard]",
            "Recyclable in [regions]",
        ],
    ),
    make_term(
        "energieeffizient",
        rf"\benergie\s*-?\s*effizient{DE_ADJ}\b",
        language="de", category="energy", severity="warning", regulation=ART_4_3,
        description="Energieeffizienz-Claims erfordern Vergleichsangaben",
        alternatives=[
            "X% energieeffizienter als [Vergleich]",
            "Energieeffizienzklasse [Klasse]",
            "Niedriger Energieverbrauch",
        ],
    ),
    make_term(
        "energy efficient",
        r"\benergy\s*-?\s*efficien(?:t|cy)\b",
        language="en", category="energy", severity="warning", regulation=ART_4_3,
        description="Energy efficiency claims require comparison details",
        alternatives=[
            "X% more energy efficient than [comparison]",
            "Energy efficiency class [class]",
            "Low energy consumption",
        ],
    ),
    make_term(
        "natürlich",
        rf"\bnatürlich{DE_ADJ}\b",
        language="de", category="general", severity="warning", regulation=ART_4_1,
        description="Natürlichkeits-Claims erfordern Spezifizierung",
        alternatives=[
            "Natürliche Inhaltsstoffe: [Liste]",
            "Aus natürlichen Materialien",
            "Natürlich in [Aspekt]",
        ],
    ),
    make_term(
        "natural",
        r"\bnatural(?:ly)?\b",
        language="en", category="general", severity="warning", regulation=ART_4_1,
        description="Natural claims require specification",
        alternatives=[
            "Natural ingredients: [list]",
            "Made from natural materials",
            "Natural in [aspect]",
        ],
    ),
    make_term(
        "umweltbewusst",
        rf"\bumweltbewusst{DE_ADJ}\b",
        language="de", category="general", severity="warning", regulation=ART_4_1,
        description="Umweltbewusstseins-Claims erfordern Konkretisierung",
        alternatives=[
            "Umweltbewusst in [Bereich]",
            "Mit Fokus auf Umweltschutz",
            "Nachhaltig in [Aspekt]",
        ],
    ),
    make_term(
        "environmentally conscious",
        r"\b(?:environmentally|eco)\s*-?\s*conscious\b",
        language="en", category="general", severity="warning", regulation=ART_4_1,
        description="Environmentally conscious claims require specification",
        alternatives=[
            "Environmentally conscious in [area]",
            "With focus on environmental protection",
            "Sustainable in [aspect]",
        ],
    ),
    make_term(
        "klimafreundlich",
        rf"\bklimafreundlich{DE_ADJ}\b",
        language="de", category="climate", severity="warning", regulation=ART_4_1,
        description="Klimafreundlichkeits-Claims erfordern Spezifizierung",
        alternatives=[
            "Klimafreundlicher als [Vergleich]",
            "Reduzierte CO2-Emissionen",
            "CO2-reduziert",
        ],
    ),
    make_term(
        "climate friendly",
        r"\bclimate\s*-?\s*friendly\b",
        language="en", category="climate", severity="warning", regulation=ART_4_1,
        description="Climate friendly claims require specification",
        alternatives=[
            "More climate friendly than [comparison]",
            "Reduced CO2 emissions",
            "CO2-reduced",
        ],
    ),
    make_term(
        "ressourcenschonend",
        rf"\bressourcenschonend{DE_ADJ}\b",
        language="de", category="general", severity="warning", regulation=ART_4_1,
        description="Ressourcenschonungs-Claims erfordern Spezifizierung",
        alternatives=[
            "Ressourcenschonend in [Bereich]",
            "Reduzierter Ressourcenverbrauch",
            "Effizienter Ressourceneinsatz",
        ],
    ),
    make_term(
        "resource efficient",
        r"\bresource\s*-?\s*efficient\b",
        language="en", category="general", severity="warning", regulation=ART_4_1,
        description="Resource efficiency claims require specification",
        alternatives=[
            "Resource efficient in [area]",
            "Reduced resource consumption",
            "Efficient resource use",
        ],
    ),

    # ---- minor ----
    make_term(
        "umweltverträglich",
        rf"\bumweltverträglich{DE_ADJ}\b",
        language="de", category="general", severity="minor", regulation=ART_5_1,
        description="Umweltverträglichkeits-Claims sollten spezifiziert werden",
        alternatives=[
            "Umweltverträglich in [Bereich]",
            "Mit reduzierten Umweltauswirkungen",
            "Nachhaltig in [Aspekt]",
        ],
    ),
    make_term(
        "environmentally compatible",
        r"\b(?:environmentally|eco)\s*compatible\b",
        language="en", category="general", severity="minor", regulation=ART_5_1,
        description="Environmental compatibility claims should be specified",
        alternatives=[
            "Environmentally compatible in [area]",
            "With reduced environmental impact",
            "Sustainable in [aspect]",
        ],
    ),
    make_term(
        "klimaschonend",
        rf"\bklimaschonend{DE_ADJ}\b",
        language="de", category="climate", severity="minor", regulation=ART_5_1,
        description="Klimaschonungs-Claims sollten spezifiziert werden",
        alternatives=[
            "Klimaschonend in [Bereich]",
            "Mit reduzierten CO2-Emissionen",
            "CO2-reduziert",
        ],
    ),
    make_term(
        "climate preserving",
        r"\bclimate\s*-?\s*preserving\b",
        language="en", category="climate", severity="minor", regulation=ART_5_1,
        description="Climate preserving claims should be specified",
        alternatives=[
            "Climate preserving in [area]",
            "With reduced CO2 emissions",
            "CO2-reduced",
        ],
    ),
    make_term(
        "nachhaltig produziert",
        r"\bnachhaltig\s*(?:produziert|hergestellt|gefertigt)\b",
        language="de", category="general", severity="minor", regulation=ART_5_1,
        description="Produktions-Claims sollten spezifiziert werden",
        alternatives=[
            "Nachhaltig produziert in [Bereich]",
            "Mit nachhaltigen Produktionsmethoden",
            "Nachhaltigere Produktion",
        ],
    ),
    make_term(
        "sustainably produced",
        r"\bsustainably\s*(?:produced|manufactured)\b",
        language="en", category="general", severity="minor", regulation=ART_5_1,
        description="Production claims should be specified",
        alternatives=[
            "Sustainably produced in [area]",
            "With sustainable production methods",
            "More sustainable production",
        ],
    ),
    make_term(
        "umweltgerecht",
        rf"\bumweltgerecht{DE_ADJ}\b",
        language="de", category="general", severity="minor", regulation=ART_5_1,
        description="Umweltgerechtigkeits-Claims sollten spezifiziert werden",
        alternatives=[
            "Umweltgerecht in [Bereich]",
            "Mit Fokus auf Umweltschutz",
            "Nachhaltig in [Aspekt]",
        ],
    ),
    make_term(
        "environmentally sound",
        r"\b(?:environmentally|eco)\s*sound\b",
        language="en", category="general", severity="minor", regulation=ART_5_1,
        description="Environmentally sound claims should be specified",
        alternatives=[
            "Environmentally sound in [area]",
            "With focus on environmental protection",
            "Sustainable in [aspect]",
        ],
    ),
    make_term(
        "klimaverträglich",
        rf"\bklimaverträglich{DE_ADJ}\b",
        language="de", category="climate", severity="minor", regulation=ART_5_1,
        description="Klimaverträglichkeits-Claims sollten spezifiziert werden",
        alternatives=[
            "Klimaverträglich in [Bereich]",
            "Mit reduzierten Klimaauswirkungen",
            "CO2-reduziert",
        ],
    ),
    make_term(
        "climate compatible",
        r"\bclimate\s*-?\s*compatible\b",
        language="en", category="climate", severity="minor", regulation=ART_5_1,
        description="Climate compatibility claims should be specified",
        alternatives=[
            "Climate compatible in [area]",
            "With reduced climate impact",
            "CO2-reduced",
        ],
    ),
    make_term(
        "wassersparend",
        rf"\bwasser\s*-?\s*sparend{DE_ADJ}\b",
        language="de", category="resources", severity="minor", regulation=ART_5_1,
        description="Wasserspar-Claims sollten die eingesparte Menge angeben",
        alternatives=[
            "50% weniger Wasserverbrauch als [Vergleich]",
            "Wassersparend: X Liter pro Zyklus",
            "Reduzierter Wasserverbrauch um X%",
        ],
    ),
    make_term(
        "water saving",
        r"\bwater\s*-?\s*saving\b",
        language="en", category="resources", severity="minor", regulation=ART_5_1,
        description="Water saving claims should specify the amount saved",
        alternatives=[
            "50% less water than [comparison]",
            "Water saving: X litres per cycle",
            "Water consumption reduced by X%",
        ],
    ),
)


def get_all_terms() -> list[TermDefinition]:
    """Return the built-in corpus in declaration order."""
    return list(BANNED_TERMS)


def get_terms_by_severity(severity: str) -> list[TermDefinition]:
    return [t for t in BANNED_TERMS if t.severity == severity]


def get_terms_by_language(language: str) -> list[TermDefinition]:
    return [t for t in BANNED_TERMS if t.language == language]


def get_terms_by_category(category: str) -> list[TermDefinition]:
    return [t for t in BANNED_TERMS if t.category == category]


_REQUIRED_KEYS = ("term", "regex", "language", "category", "severity", "regulation", "description")
_OPTIONAL_KEYS = ("alternatives", "penalty_range")


def load_terms_from_yaml(path: Optional[str] = None) -> list[TermDefinition]:
    """Load extra term definitions from a YAML file.

    Parameters
    ----------
    path : str, optional
        Location of the YAML file.  Falls back to the ``GREENCLAIMS_TERMS``
        environment variable; without either, no extra terms are loaded.

    Returns
    -------
    list[TermDefinition]
        Terms in file order.  A missing file yields an empty list.

    Raises
    ------
    TermLoadError
        If the file is not a YAML list of mappings, an entry lacks a
        required key or carries an unknown one, or its regex does not
        compile.
    """
    path = path or os.getenv("GREENCLAIMS_TERMS")
    if not path:
        return []
    path = os.path.abspath(path)
    if not os.path.exists(path):
        logger.warning(f"Term file not found, skipping: {path}")
        return []

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or []
        except yaml.YAMLError as e:
            raise TermLoadError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, list):
        raise TermLoadError(f"{path}: expected a list of term entries, got {type(data).__name__}")

    terms: list[TermDefinition] = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise TermLoadError(f"{path}: entry #{i} is not a mapping")
        label = entry.get("term", f"#{i}")
        missing = [k for k in _REQUIRED_KEYS if k not in entry]
        if missing:
            raise TermLoadError(f"{path}: entry {label!r} is missing {', '.join(missing)}")
        unknown = set(entry) - set(_REQUIRED_KEYS) - set(_OPTIONAL_KEYS)
        if unknown:
            raise TermLoadError(f"{path}: entry {label!r} has unknown keys {sorted(unknown)}")
        alternatives = entry.get("alternatives") or []
        if isinstance(alternatives, str):
            alternatives = [alternatives]
        if not isinstance(alternatives, list):
            raise TermLoadError(f"{path}: entry {label!r} alternatives must be a list of strings")
        try:
            terms.append(
                make_term(
                    str(entry["term"]),
                    str(entry["regex"]),
                    language=entry["language"],
                    category=entry["category"],
                    severity=entry["severity"],
                    regulation=str(entry["regulation"]),
                    description=str(entry["description"]),
                    alternatives=[str(a) for a in alternatives],
                    penalty_range=entry.get("penalty_range"),
                )
            )
        except (re.error, ValueError) as e:
            raise TermLoadError(f"{path}: entry {label!r} is invalid: {e}") from e

    logger.debug(f"Loaded {len(terms)} extra terms from {path}")
    return terms
