"""Tests for application settings."""

import dataclasses

import pytest
from bakery.config import Settings


class TestSettingsFromEnv:
    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings.s3_bucket is None
        assert settings.s3_region is None
        assert settings.port == 3000
        assert settings.seed_catalogue is True

    def test_reads_values(self):
        settings = Settings.from_env(
            {"S3_BUCKET": "treats", "S3_REGION": "eu-west-1", "PORT": "8080", "SEED_CATALOGUE": "false"}
        )

        assert settings.s3_bucket == "treats"
        assert settings.s3_region == "eu-west-1"
        assert settings.port == 8080
        assert settings.seed_catalogue is False

    def test_blank_bucket_treated_as_unset(self):
        assert Settings.from_env({"S3_BUCKET": ""}).s3_bucket is None

    def test_frozen(self):
        settings = Settings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.port = 1


class TestImageUrl:
    def test_object_storage_url(self):
        settings = Settings(s3_bucket="treats", s3_region="eu-west-1")
        assert settings.image_url("carrot_cake.jpg", label="Carrot Cake") == (
            "https://treats.s3.eu-west-1.amazonaws.com/carrot_cake.jpg"
        )

    def test_placeholder_without_region(self):
        settings = Settings(s3_bucket="treats")
        url = settings.image_url("carrot_cake.jpg", label="Carrot Cake")

        assert url.startswith("https://via.placeholder.com/")
        assert url.endswith("text=Carrot%20Cake")
