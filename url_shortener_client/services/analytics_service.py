"""
Analytics Rendering

Renders an analytics report as an XML document:

    <?xml version="1.0" encoding="UTF-8"?>
    <analytics>
        <day>
            <clicks shortUrl="12" longUrl="40"/>
            <browsers>
                <browser id="Chrome" count="9"/>
            </browsers>
        </day>
    </analytics>

Time ranges and breakdowns are emitted in the order the API returned them.
Indentation uses tabs.
"""

from xml.sax.saxutils import escape

from url_shortener_client.api.schemas import AnalyticsReport, PeriodStats

__all__ = ["render_analytics_xml", "singularize"]

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Breakdown names that do not singularize by dropping a trailing 's'
IRREGULAR_SINGULARS = {
    "countries": "country",
}


def singularize(name: str) -> str:
    """Tag name for one entry of the breakdown called name."""
    if name in IRREGULAR_SINGULARS:
        return IRREGULAR_SINGULARS[name]
    if name.endswith("s"):
        return name[:-1]
    return name


def _attr(value) -> str:
    # A count the API did not send renders empty, never as 0
    if value is None:
        return ""
    return escape(str(value), {'"': "&quot;"})


def _render_period(name: str, stats: PeriodStats) -> str:
    xml = f"\t<{name}>\n"
    xml += (
        f'\t\t<clicks shortUrl="{_attr(stats.short_url_clicks)}"'
        f' longUrl="{_attr(stats.long_url_clicks)}"/>\n'
    )
    for field, entries in stats.breakdowns.items():
        tag = singularize(field)
        xml += f"\t\t<{field}>\n"
        for entry in entries:
            xml += f'\t\t\t<{tag} id="{_attr(entry.id)}" count="{_attr(entry.count)}"/>\n'
        xml += f"\t\t</{field}>\n"
    xml += f"\t</{name}>\n"
    return xml


def render_analytics_xml(report: AnalyticsReport) -> str:
    """
    Render the analytics section of a report as XML.

    Args:
        report: Parsed analytics response

    Returns:
        The XML document as a string
    """
    xml = XML_DECLARATION
    xml += "<analytics>\n"
    for name, stats in report.analytics.items():
        xml += _render_period(name, stats)
    xml += "</analytics>\n"
    return xml
