from equipment_loans.utils.collation import collation_key
from equipment_loans.utils.ids import generate_id


class TestCollation:
    """Locale-aware name ordering"""

    def test_accents_do_not_push_names_to_the_end(self):
        names = ["Bruno Martin", "Émile Zola", "Amélie Martin", "amandine Roux"]

        assert sorted(names, key=collation_key) == [
            "amandine Roux", "Amélie Martin", "Bruno Martin", "Émile Zola"
        ]

    def test_accent_only_breaks_ties(self):
        assert collation_key("Eric") < collation_key("Éric")


class TestIdGenerator:
    """Record identifiers"""

    def test_ids_are_lowercase_base36(self):
        record_id = generate_id()

        assert record_id.isalnum()
        assert record_id == record_id.lower()
        assert len(record_id) > 11
