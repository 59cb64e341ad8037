"""Tests for development and deployment taxonomies."""
from idea_validator.analytics.plans import (
    deployment_category_counts,
    deployment_complexity_counts,
    deployment_taxonomy,
    development_category_counts,
    development_taxonomy,
)
from idea_validator.models import DeploymentCategory, DevelopmentCategory, Level


class TestDevelopmentTaxonomy:

    def test_items_per_record(self, make_record):
        records = [
            make_record({"key_developments": ["Build app", "Grow brand"]}),
            make_record(None),
            make_record({"key_developments": ["Hire team"]}),
        ]
        items = development_taxonomy(records)
        assert [(i.idea_label, i.category) for i in items] == [
            ("Idea 1", DevelopmentCategory.TECHNOLOGY),
            ("Idea 1", DevelopmentCategory.MARKETING),
            ("Idea 3", DevelopmentCategory.OTHER),
        ]
        assert items[0].length == len("Build app")

    def test_category_counts_omit_zero(self, make_record):
        items = development_taxonomy([make_record({"key_developments": ["Build app", "Launch API"]})])
        assert development_category_counts(items) == {"Technology": 2}


class TestDeploymentTaxonomy:

    def test_phases_start_at_one(self, make_record):
        items = deployment_taxonomy([make_record({"deployment_steps": ["Plan", "Develop", "Release"]})])
        assert [i.phase for i in items] == [1, 2, 3]
        assert [i.category for i in items] == [
            DeploymentCategory.PLANNING,
            DeploymentCategory.DEVELOPMENT,
            DeploymentCategory.LAUNCH,
        ]

    def test_counts(self, make_record):
        items = deployment_taxonomy([make_record({
            "deployment_steps": ["Security review", "Integration testing", "Print flyers", "Beta testing"],
        })])
        assert deployment_complexity_counts(items) == {"High": 2, "Medium": 1, "Low": 1}
        assert deployment_category_counts(items)["Testing"] == 2

    def test_empty(self):
        assert deployment_taxonomy([]) == []
        assert deployment_complexity_counts([]) == {}
