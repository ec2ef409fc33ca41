"""Common literal values used across npixray_pages.

These constants keep URL shapes, filenames, and schema identifiers centralized
so templates, generators, and tests can import the same values without
drifting. Intended for internal use within the npixray_pages package.

Examples
--------
>>> from npixray_pages import _constants
>>> _constants.ANSWER_PATH_TEMPLATE.format(slug="what-is-npi-number")
'/answers/what-is-npi-number'
>>> _constants.SCHEMA_CONTEXT
'https://schema.org'
"""

DEFAULT_ORIGIN = "https://npixray.com"
ANSWERS_PATH = "/answers"
ANSWER_PATH_TEMPLATE = ANSWERS_PATH + "/{slug}"
SCHEMA_CONTEXT = "https://schema.org"
NOT_FOUND_TITLE = "Answer Not Found"
NOT_FOUND_FILENAME = "404.html"
SITEMAP_FILENAME = "sitemap-answers.xml"
PARAGRAPH_DELIMITER = "\n\n"
