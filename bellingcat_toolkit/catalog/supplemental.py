"""Built-in tools appended after the fetched tool list"""
from typing import List

from bellingcat_toolkit.catalog.record import RecordOrigin, ToolRecord

EXTRA_TOOLS = (
    {
        "name": "WHOIS Lookup",
        "description": "Check domain registration info.",
        "url": "https://whois.domaintools.com/",
        "category": "Domain Investigation",
    },
    {
        "name": "Shodan",
        "description": "Search for devices connected to the internet.",
        "url": "https://www.shodan.io/",
        "category": "Network Intelligence",
    },
)


def supplemental_records() -> List[ToolRecord]:
    """Fresh records for the built-in tools, in fixed order"""
    return [ToolRecord.from_dict(tool, origin=RecordOrigin.SUPPLEMENTAL) for tool in EXTRA_TOOLS]
