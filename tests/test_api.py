import random
import unittest

from fastapi.testclient import TestClient

from app.ai.fallbacks import GENERIC_CHAT_RESPONSES, RESUME_SUGGESTIONS, persona_chat_responses
from app.core.state import AppState
from app.main import create_app
from app.scoring.catalog import Catalog
from tests.fakes import FakeCapability


def _client(**state_kwargs) -> TestClient:
    state_kwargs.setdefault("rng", random.Random(1234))
    return TestClient(create_app(AppState(**state_kwargs)))


class RecommendApiTests(unittest.TestCase):
    def setUp(self):
        self.client = _client()

    def test_recommend_contract_shape(self):
        response = self.client.post("/v1/recommend", json={"type": "movie"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(len(body["recommendations"]), 3)
        first = body["recommendations"][0]
        for key in ("id", "title", "genre", "year", "rating", "score", "justification"):
            self.assertIn(key, first)
        self.assertTrue(85 <= body["stats"]["accuracy"] <= 95)
        self.assertIn("trainingSize", body["stats"])
        self.assertEqual(body["stats"]["modelType"], "Collaborative Filtering + Content-Based Hybrid")
        scores = [item["score"] for item in body["recommendations"]]
        self.assertEqual(scores, sorted(scores, reverse=True))

    def test_music_items_omit_rating(self):
        response = self.client.post("/v1/recommend", json={"type": "music", "preferences": {"minYear": 1975}})
        self.assertEqual(response.status_code, 200)
        for item in response.json()["recommendations"]:
            self.assertNotIn("rating", item)
            self.assertIn("artist", item)

    def test_defaults_to_movies(self):
        response = self.client.post("/v1/recommend", json={})
        self.assertEqual(response.status_code, 200)
        self.assertTrue(all(item["category"] == "movie" for item in response.json()["recommendations"]))

    def test_null_type_and_preferences_use_defaults(self):
        response = self.client.post("/v1/recommend", json={"type": None, "preferences": None})
        self.assertEqual(response.status_code, 200)
        recommendations = response.json()["recommendations"]
        self.assertEqual(len(recommendations), 3)
        self.assertTrue(all(item["category"] == "movie" for item in recommendations))

    def test_high_rated_movies_rank_above_lower_rated_more_often_than_chance(self):
        favoured = ("The Dark Knight", "Pulp Fiction")
        lower = ("Inception", "The Matrix", "Interstellar")
        wins = comparisons = 0
        for _ in range(200):
            response = self.client.post(
                "/v1/recommend",
                json={"type": "movie", "preferences": {"minRating": 8.9}, "limit": 5},
            )
            ranking = [item["title"] for item in response.json()["recommendations"]]
            for high in favoured:
                for low in lower:
                    comparisons += 1
                    wins += int(ranking.index(high) < ranking.index(low))
        self.assertGreater(wins / comparisons, 0.6)

    def test_empty_catalog_is_client_error(self):
        client = _client(catalog=Catalog(items={"movie": (), "music": ()}))
        response = client.post("/v1/recommend", json={"type": "movie"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.json())

    def test_rate_requires_item_and_rating(self):
        response = self.client.post("/v1/recommend/rate", json={"itemId": 1})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "itemId and rating are required"})

        ok = self.client.post("/v1/recommend/rate", json={"itemId": 1, "rating": 0})
        self.assertEqual(ok.status_code, 200)
        self.assertEqual(ok.json(), {"success": True, "message": "Rating recorded"})

    def test_stats(self):
        response = self.client.get("/v1/recommend/stats")
        self.assertEqual(response.status_code, 200)
        stats = response.json()["stats"]
        self.assertEqual(stats["totalItems"], 10)
        self.assertTrue(50 <= stats["totalUsers"] < 150)


class ResumeApiTests(unittest.TestCase):
    def setUp(self):
        self.client = _client()

    def test_optimize_requires_non_empty_content(self):
        response = self.client.post("/v1/optimize", json={"section": "summary", "content": ""})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Section and content are required"})

    def test_optimize_requires_section(self):
        response = self.client.post("/v1/optimize", json={"content": "Built things"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.json())

    def test_optimize_falls_back_without_capability(self):
        response = self.client.post(
            "/v1/optimize",
            json={"section": "summary", "content": "Backend engineer building python services with python tooling"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertIn(body["suggestion"], RESUME_SUGGESTIONS["summary"])
        self.assertTrue(75 <= body["atsScore"] <= 95)
        self.assertEqual(body["keywords"][0], "python")
        self.assertEqual(len(body["improvements"]), 3)

    def test_optimize_blends_job_description(self):
        response = self.client.post(
            "/v1/optimize",
            json={
                "section": "skills",
                "content": "python docker kubernetes",
                "jobDescription": "python docker kubernetes",
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["atsScore"], 95)

    def test_optimize_uses_capability_when_available(self):
        capability = FakeCapability(reply="Lead with impact metrics.")
        client = _client(capability=capability)
        response = client.post("/v1/optimize", json={"section": "experience", "content": "Led a team"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["suggestion"], "Lead with impact metrics.")
        prompt = capability.calls[0]["messages"][-1].content
        self.assertIn("Section: experience", prompt)

    def test_optimize_survives_failing_capability(self):
        client = _client(capability=FakeCapability(error=ConnectionError("down")))
        response = client.post("/v1/optimize", json={"section": "education", "content": "BSc CS"})
        self.assertEqual(response.status_code, 200)
        self.assertIn(response.json()["suggestion"], RESUME_SUGGESTIONS["education"])

    def test_analyze(self):
        response = self.client.post("/v1/analyze", json={"content": "• Led 3 teams\n• Built 2 apps"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["analysis"]["bulletPoints"], 2)
        self.assertEqual(body["analysis"]["actionVerbs"], 2)
        self.assertEqual(body["analysis"]["numbers"], 2)
        self.assertTrue(70 <= body["analysis"]["atsScore"] <= 95)
        self.assertIn("Consider adding more detail to your resume", body["recommendations"])

    def test_analyze_empty_content(self):
        response = self.client.post("/v1/analyze", json={})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["analysis"]["wordCount"], 0)

    def test_template_falls_back_to_general(self):
        known = self.client.post("/v1/resume-template", json={"templateType": "data-scientist"})
        self.assertIn("Publications", known.json()["template"]["sections"])
        unknown = self.client.post("/v1/resume-template", json={"templateType": "astronaut"})
        self.assertEqual(unknown.json()["template"]["tips"], "Tailor content to match job requirements")


class ChatApiTests(unittest.TestCase):
    def test_chat_requires_message(self):
        client = _client()
        response = client.post("/v1/chat", json={"message": ""})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Message is required"})

    def test_chat_fallback(self):
        client = _client()
        response = client.post("/v1/chat", json={"message": "What did you build at MITRE?"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertIn(body["response"], persona_chat_responses())

    def test_chat_passes_history(self):
        capability = FakeCapability(reply="Sure.")
        client = _client(capability=capability)
        response = client.post(
            "/v1/chat",
            json={
                "message": "And after that?",
                "conversationHistory": [
                    {"role": "user", "content": "Tell me about projects"},
                    {"role": "assistant", "content": "Campus Chirp and FoundU."},
                ],
            },
        )
        self.assertEqual(response.json()["response"], "Sure.")
        contents = [m.content for m in capability.calls[0]["messages"]]
        self.assertEqual(contents[1:], ["Tell me about projects", "Campus Chirp and FoundU.", "And after that?"])

    def test_ai_chat_messages_format(self):
        capability = FakeCapability(reply="42")
        client = _client(capability=capability)
        response = client.post(
            "/v1/ai-chat",
            json={
                "messages": [
                    {"role": "user", "content": "first"},
                    {"role": "assistant", "content": "reply"},
                    {"role": "user", "content": "second"},
                ]
            },
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["response"], "42")
        self.assertIn("timestamp", body)
        messages = capability.calls[0]["messages"]
        self.assertEqual([m.content for m in messages[1:]], ["first", "reply", "second"])

    def test_ai_chat_without_message(self):
        client = _client()
        response = client.post("/v1/ai-chat", json={"messages": [{"role": "assistant", "content": "hi"}]})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "No message content found"})

    def test_ai_chat_fallback(self):
        client = _client()
        response = client.post("/v1/ai-chat", json={"message": "hello"})
        self.assertEqual(response.status_code, 200)
        self.assertIn(response.json()["response"], GENERIC_CHAT_RESPONSES)


class ErrorHandlingTests(unittest.TestCase):
    def test_malformed_json_is_server_error(self):
        client = _client()
        response = client.post(
            "/v1/chat",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(response.status_code, 500)
        self.assertIn("error", response.json())

    def test_wrong_field_type_is_client_error(self):
        client = _client()
        response = client.post("/v1/recommend", json={"type": "books"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Invalid request body"})


if __name__ == "__main__":
    unittest.main()
