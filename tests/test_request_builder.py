import unittest
from unittest.mock import MagicMock

from merger.models import AspectRatio, ImageInput, QualityTier
from merger.request_builder import build_request, send_request
from merger.tiers import select_tier

IMAGE_A = ImageInput(data=b"\x89PNG-a", mime_type="image/png")
IMAGE_B = ImageInput(data=b"\xff\xd8-b", mime_type="image/jpeg")


class TestBuildRequest(unittest.TestCase):
    def test_part_order_is_instruction_then_a_then_b(self):
        for instruction in ["put the cat on the couch", "", "Ignore images: {braces} and 100%"]:
            request = build_request(IMAGE_A, IMAGE_B, instruction, AspectRatio.SQUARE,
                                    select_tier(QualityTier.STANDARD))
            parts = request.parts
            self.assertEqual(len(parts), 3)
            self.assertIn(instruction, parts[0].text)
            self.assertIsNone(parts[0].inline_data)
            self.assertEqual(parts[1].inline_data.data, IMAGE_A.data)
            self.assertEqual(parts[1].inline_data.mime_type, "image/png")
            self.assertEqual(parts[2].inline_data.data, IMAGE_B.data)
            self.assertEqual(parts[2].inline_data.mime_type, "image/jpeg")

    def test_instruction_framing(self):
        request = build_request(IMAGE_A, IMAGE_B, "a dog wearing the hat", "1:1",
                                select_tier(QualityTier.STANDARD))
        self.assertEqual(
            request.prompt,
            "Merge these two images into one based on this description: a dog wearing the hat. "
            "Ensure the result is a single cohesive image.",
        )

    def test_standard_config_has_no_image_size(self):
        request = build_request(IMAGE_A, IMAGE_B, "merge", AspectRatio.LANDSCAPE,
                                select_tier(QualityTier.STANDARD))
        image_config = request.config.image_config
        self.assertEqual(image_config.aspect_ratio, "16:9")
        self.assertIsNone(image_config.image_size)

    def test_high_config_has_image_size(self):
        request = build_request(IMAGE_A, IMAGE_B, "merge", AspectRatio.PORTRAIT,
                                select_tier(QualityTier.HIGH))
        image_config = request.config.image_config
        self.assertEqual(image_config.aspect_ratio, "9:16")
        self.assertEqual(image_config.image_size, "2K")

    def test_send_request_passes_model_parts_and_config(self):
        client = MagicMock()
        request = build_request(IMAGE_A, IMAGE_B, "merge", "4:3", select_tier(QualityTier.HIGH))

        send_request(client, request)

        kwargs = client.models.generate_content.call_args.kwargs
        self.assertEqual(kwargs["model"], request.model)
        self.assertEqual(len(kwargs["contents"]), 3)
        self.assertEqual(kwargs["config"].image_config.image_size, "2K")


if __name__ == "__main__":
    unittest.main()
