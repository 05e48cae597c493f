# ==============================================
# AuthorAnalyzer
# ==============================================
#
# PURPOSE:
#   Rank authors, countries and affiliations of an author.csv
#   export by how often they occur.
#
# INPUT COLUMNS (header override):
#   submissionId | firstName | lastName | email | country |
#   affiliation | page | personId | corresponding
#
# OUTPUT:
#   {
#     "topAuthors":      {"labels": [...], "data": [...]},
#     "topCountries":    {"labels": [...], "data": [...]},
#     "topAffiliations": {"labels": [...], "data": [...]},
#   }
#   One author row counts once per submission it appears on.
#
# ==============================================

from typing import Any, Dict, Optional

from confstats.parsing import AUTHOR_LAYOUT, AuthorRecord, TabularParser, build_records
from .aggregation import count_by, sorted_by_count_desc, split_pairs


class AuthorAnalyzer:
    """Frequency rankings over author.csv."""

    def __init__(self, parser: Optional[TabularParser] = None):
        self.parser = parser or TabularParser()

    def analyze(self, text: str) -> Dict[str, Any]:
        parsed = self.parser.parse(text, AUTHOR_LAYOUT)
        authors = build_records(parsed, AuthorRecord.from_raw)
        parsed.log_errors("author.csv")

        author_counts = count_by(authors, lambda a: a.full_name)
        country_counts = count_by(authors, lambda a: a.country)
        affiliation_counts = count_by(authors, lambda a: a.affiliation)

        return {
            "topAuthors": split_pairs(sorted_by_count_desc(author_counts)),
            "topCountries": split_pairs(sorted_by_count_desc(country_counts)),
            "topAffiliations": split_pairs(sorted_by_count_desc(affiliation_counts)),
        }
