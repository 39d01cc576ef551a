import unittest

from merger.constants import MODEL_STANDARD, MODEL_HIGH_RES
from merger.models import QualityTier
from merger.tiers import select_tier


class TestSelectTier(unittest.TestCase):
    def test_size_hint_only_for_high_tier(self):
        for tier in QualityTier:
            selection = select_tier(tier)
            self.assertEqual(selection.image_size is not None, tier == QualityTier.HIGH)

    def test_standard_tier(self):
        selection = select_tier(QualityTier.STANDARD)
        self.assertEqual(selection.tier, QualityTier.STANDARD)
        self.assertEqual(selection.model, MODEL_STANDARD)
        self.assertIsNone(selection.image_size)

    def test_high_tier(self):
        selection = select_tier(QualityTier.HIGH)
        self.assertEqual(selection.tier, QualityTier.HIGH)
        self.assertEqual(selection.model, MODEL_HIGH_RES)
        self.assertEqual(selection.image_size, "2K")

    def test_model_overrides(self):
        selection = select_tier(QualityTier.HIGH, standard_model="std", high_res_model="pro")
        self.assertEqual(selection.model, "pro")
        self.assertEqual(select_tier(QualityTier.STANDARD, standard_model="std").model, "std")


class TestParsing(unittest.TestCase):
    def test_quality_aliases(self):
        self.assertEqual(QualityTier.parse("High (2K)"), QualityTier.HIGH)
        self.assertEqual(QualityTier.parse("HIGH"), QualityTier.HIGH)
        self.assertEqual(QualityTier.parse("2k"), QualityTier.HIGH)
        self.assertEqual(QualityTier.parse("standard"), QualityTier.STANDARD)
        self.assertEqual(QualityTier.parse(None), QualityTier.STANDARD)

    def test_unknown_quality(self):
        with self.assertRaises(ValueError):
            QualityTier.parse("ultra")

    def test_aspect_ratio(self):
        from merger.models import AspectRatio

        self.assertEqual(AspectRatio.parse("16:9"), AspectRatio.LANDSCAPE)
        self.assertEqual(AspectRatio.parse(""), AspectRatio.SQUARE)
        with self.assertRaises(ValueError):
            AspectRatio.parse("2:1")


if __name__ == "__main__":
    unittest.main()
