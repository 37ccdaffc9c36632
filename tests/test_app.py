import os
import json
import unittest
from unittest.mock import patch

from app import app as flask_app
from app import json_to_state, state_to_json
from game import Board, GameState, Marker, new_game


def _post(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type="application/json")


def _state_json(rows, active, passes=0):
    board = Board.from_rows(rows)
    s = GameState(
        board=board,
        active=active,
        score=(board.count(Marker.PLAYER_ONE), board.count(Marker.PLAYER_TWO)),
        passes=passes,
    )
    return state_to_json(s)


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self._env = patch.dict(os.environ, {"REVERSI_WIDTH": "", "REVERSI_HEIGHT": ""})
        self._env.start()
        self.client = flask_app.test_client()

    def tearDown(self):
        self._env.stop()

    def test_given_health_endpoint_when_requested_then_ok(self):
        r = self.client.get("/api/health")
        self.assertEqual(r.status_code, 200)
        self.assertTrue(r.get_json()["ok"])

    def test_given_new_game_when_posted_then_default_state_and_four_legal_moves(self):
        r = _post(self.client, "/api/new", {})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["ok"])
        state = data["state"]
        self.assertEqual((state["width"], state["height"]), (8, 8))
        self.assertEqual(len(state["grid"]), 8)
        self.assertEqual(state["score"], [2, 2])
        self.assertEqual(state["active"], 1)
        self.assertFalse(state["terminal"])
        self.assertEqual(len(data["legalMoves"]), 4)
        self.assertTrue(all(len(m["captures"]) == 1 for m in data["legalMoves"]))

    def test_given_size_params_when_creating_game_then_invalid_values_fall_back(self):
        r = self.client.post("/api/new?width=6&height=abc")
        state = r.get_json()["state"]
        self.assertEqual((state["width"], state["height"]), (6, 8))

        r2 = _post(self.client, "/api/new", {"width": 10, "height": 6})
        state2 = r2.get_json()["state"]
        self.assertEqual((state2["width"], state2["height"]), (10, 6))
        self.assertEqual(len(state2["grid"]), 6)
        self.assertEqual(len(state2["grid"][0]), 10)

    def test_given_legal_move_when_posted_then_state_advances_to_bot(self):
        state = _post(self.client, "/api/new", {}).get_json()["state"]
        r = _post(self.client, "/api/move", {"state": state, "move": [3, 2]})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertTrue(d["changed"])
        self.assertEqual(d["state"]["active"], 2)
        self.assertEqual(d["state"]["score"], [4, 1])
        self.assertEqual(d["state"]["lastMoves"][0]["move"], [3, 2])
        self.assertEqual(d["state"]["lastMoves"][0]["captures"], [[3, 3]])

        r2 = _post(self.client, "/api/move", {"state": state, "move": "2,3"})
        self.assertTrue(r2.get_json()["changed"])

    def test_given_illegal_move_when_posted_then_no_change(self):
        state = _post(self.client, "/api/new", {}).get_json()["state"]
        r = _post(self.client, "/api/move", {"state": state, "move": [0, 0]})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertFalse(d["changed"])
        self.assertEqual(d["state"]["grid"], state["grid"])
        self.assertEqual(d["state"]["active"], 1)

    def test_given_malformed_coordinate_when_posted_then_400(self):
        state = _post(self.client, "/api/new", {}).get_json()["state"]
        for move in ["a,b", "3", [9, 9], [1], None, ["x", 1]]:
            with self.subTest(move=move):
                r = _post(self.client, "/api/move", {"state": state, "move": move})
                self.assertEqual(r.status_code, 400)
                self.assertFalse(r.get_json()["ok"])

    def test_given_bad_state_when_posted_then_400(self):
        for bad in [None, {"width": 8}, {"width": 4, "height": 4, "grid": [[0] * 4] * 3},
                    {"width": 4, "height": 4, "grid": [[7] * 4] * 4},
                    {"width": 3, "height": 3, "grid": [[0] * 3] * 3},
                    {"width": 40, "height": 40, "grid": [[0] * 40] * 40},
                    {"width": 27, "height": 4, "grid": [[0] * 27] * 4}]:
            with self.subTest(state=bad):
                r = _post(self.client, "/api/legal", {"state": bad})
                self.assertEqual(r.status_code, 400)
                self.assertFalse(r.get_json()["ok"])

    def test_given_after_human_move_when_ai_called_then_bot_reply_and_human_moves(self):
        state = _post(self.client, "/api/new", {}).get_json()["state"]
        next_state = _post(self.client, "/api/move", {"state": state, "move": [3, 2]}).get_json()["state"]
        r = _post(self.client, "/api/ai", {"state": next_state})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertTrue(d["ok"])
        self.assertEqual([m["move"] for m in d["moves"]], [[2, 2]])
        self.assertEqual(d["state"]["active"], 1)
        self.assertEqual(d["state"]["score"], [3, 3])
        self.assertFalse(d["terminal"])
        self.assertIsNone(d["winner"])
        self.assertTrue(d["legalMoves"])

    def test_given_nobody_can_move_when_ai_called_then_terminal_with_winner(self):
        st = _state_json(["XX..", "....", "....", "...."], Marker.PLAYER_TWO)
        d = _post(self.client, "/api/ai", {"state": st}).get_json()
        self.assertTrue(d["terminal"])
        self.assertEqual(d["winner"], 1)
        self.assertEqual(d["moves"], [])
        self.assertEqual(d["state"]["grid"], st["grid"])
        self.assertEqual(d["legalMoves"], [])

    def test_given_human_without_moves_when_pass_posted_then_bot_to_move(self):
        st = _state_json(["OX..", "....", "....", "...."], Marker.PLAYER_ONE)
        d = _post(self.client, "/api/pass", {"state": st}).get_json()
        self.assertTrue(d["changed"])
        self.assertEqual(d["state"]["active"], 2)
        self.assertEqual(d["state"]["passes"], 1)
        self.assertFalse(d["terminal"])

        fresh = _post(self.client, "/api/new", {}).get_json()["state"]
        d2 = _post(self.client, "/api/pass", {"state": fresh}).get_json()
        self.assertFalse(d2["changed"])

    def test_given_state_when_round_tripping_json_then_score_recounted(self):
        s = new_game(6, 6)
        obj = state_to_json(s)
        obj["score"] = [99, 99]
        back = json_to_state(obj)
        self.assertEqual(back.board, s.board)
        self.assertEqual(back.score, (2, 2))
        self.assertEqual(back.active, s.active)

    def test_given_non_boolean_terminal_when_posted_then_400(self):
        state = _post(self.client, "/api/new", {}).get_json()["state"]
        for flag in ["false", "true", 0, 1, None]:
            with self.subTest(terminal=flag):
                bad = dict(state, terminal=flag)
                r = _post(self.client, "/api/move", {"state": bad, "move": [3, 2]})
                self.assertEqual(r.status_code, 400)
                self.assertFalse(r.get_json()["ok"])
        ok = _post(self.client, "/api/move", {"state": dict(state, terminal=False), "move": [3, 2]})
        self.assertTrue(ok.get_json()["changed"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
