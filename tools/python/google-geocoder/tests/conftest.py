"""Shared fixtures: canned ``GeocodeResponse`` XML documents and log handler cleanup."""

from __future__ import annotations

import logging

import pytest

GOOGLEPLEX_XML = """<?xml version="1.0" encoding="UTF-8"?>
<GeocodeResponse>
 <status>OK</status>
 <result>
  <type>street_address</type>
  <formatted_address>1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA</formatted_address>
  <address_component>
   <long_name>1600</long_name>
   <short_name>1600</short_name>
   <type>street_number</type>
  </address_component>
  <address_component>
   <long_name>Amphitheatre Parkway</long_name>
   <short_name>Amphitheatre Pkwy</short_name>
   <type>route</type>
  </address_component>
  <address_component>
   <long_name>Mountain View</long_name>
   <short_name>Mountain View</short_name>
   <type>locality</type>
   <type>political</type>
  </address_component>
  <address_component>
   <long_name>California</long_name>
   <short_name>CA</short_name>
   <type>administrative_area_level_1</type>
   <type>political</type>
  </address_component>
  <address_component>
   <long_name>United States</long_name>
   <short_name>US</short_name>
   <type>country</type>
   <type>political</type>
  </address_component>
  <address_component>
   <long_name>94043</long_name>
   <short_name>94043</short_name>
   <type>postal_code</type>
  </address_component>
  <geometry>
   <location>
    <lat>37.4224764</lat>
    <lng>-122.0842499</lng>
   </location>
   <location_type>ROOFTOP</location_type>
   <viewport>
    <southwest>
     <lat>37.4211274</lat>
     <lng>-122.0855989</lng>
    </southwest>
    <northeast>
     <lat>37.4238254</lat>
     <lng>-122.0829009</lng>
    </northeast>
   </viewport>
  </geometry>
  <place_id>ChIJ2eUgeAK6j4ARbn5u_wAGqWA</place_id>
 </result>
</GeocodeResponse>
"""

ZERO_RESULTS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<GeocodeResponse>
 <status>ZERO_RESULTS</status>
</GeocodeResponse>
"""


def status_xml(status: str) -> str:
    """Build a result-less response carrying *status*."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f"<GeocodeResponse><status>{status}</status></GeocodeResponse>"
    )


@pytest.fixture()
def make_status_xml():
    return status_xml


@pytest.fixture()
def googleplex_xml() -> str:
    return GOOGLEPLEX_XML


@pytest.fixture()
def zero_results_xml() -> str:
    return ZERO_RESULTS_XML


@pytest.fixture(autouse=True)
def _detach_log_handlers():
    """Drop console handlers attached by ``configure_logging`` during a test."""
    yield
    root = logging.getLogger("geoscripthub")
    for handler in list(root.handlers):
        root.removeHandler(handler)
