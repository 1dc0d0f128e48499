from tests.api.base import *  # noqa: F401,F403


class NotificationApiTests(StorefrontApiBase):
    def test_list_is_scoped_to_principal_newest_first(self):
        response = self.client.get("/notify-logs", headers=self.customer_headers())
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual([row["id"] for row in body["data"]], [4, 2, 1])
        self.assertEqual(body["meta"]["per_page"], 50)
        self.assertEqual(body["meta"]["path"], "/notify-logs")

        staff = self.client.get("/notify-logs", headers=self.staff_headers()).json()
        self.assertEqual([row["id"] for row in staff["data"]], [3])

    def test_scope_cannot_be_widened_by_query(self):
        body = self.client.get("/notify-logs", params={"user_id": STAFF_ID}, headers=self.customer_headers()).json()
        self.assertEqual({row["user_id"] for row in body["data"]}, {CUSTOMER_ID})

    def test_filters_and_sorting(self):
        unread = self.client.get("/notify-logs", params={"is_read": "false"}, headers=self.customer_headers()).json()
        self.assertEqual([row["id"] for row in unread["data"]], [4, 1])

        by_title = self.client.get(
            "/notify-logs",
            params={"orderBy": "title", "sortedBy": "asc"},
            headers=self.customer_headers(),
        ).json()
        self.assertEqual([row["title"] for row in by_title["data"]], ["Order Confirmed", "Order Shipped", "Refund Approved"])

    def test_requires_token(self):
        self.assertEqual(self.client.get("/notify-logs").status_code, 401)

    def test_get_other_users_notification_is_404(self):
        self.assertEqual(self.client.get("/notify-logs/3", headers=self.customer_headers()).status_code, 404)
        response = self.client.get("/notify-logs/1", headers=self.customer_headers())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["title"], "Order Confirmed")

    def test_mark_seen(self):
        response = self.client.post(
            "/notify-logs/notify-log-seen",
            json={"notification_ids": [1, 2, 3]},
            headers=self.customer_headers(),
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["updated"], [1])

        row = self.client.get("/notify-logs/1", headers=self.customer_headers()).json()
        self.assertTrue(row["is_read"])
        self.assertTrue(row["read_at"].endswith("Z"))
        other = self.client.get("/notify-logs", headers=self.staff_headers()).json()["data"][0]
        self.assertFalse(other["is_read"])

    def test_mark_all_read(self):
        response = self.client.post("/notify-logs/notify-log-read-all", headers=self.customer_headers())
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["count"], 2)
        self.assertEqual(body["message"], "2 notification(s) marked as read")

        unread = self.client.get("/notify-logs", params={"is_read": "false"}, headers=self.customer_headers()).json()
        self.assertEqual(unread["data"], [])
        staff = self.client.get("/notify-logs", headers=self.staff_headers()).json()["data"][0]
        self.assertFalse(staff["is_read"])

        again = self.client.post("/notify-logs/notify-log-read-all", headers=self.customer_headers()).json()
        self.assertEqual(again["count"], 0)

    def test_delete_is_super_admin_only(self):
        self.assertEqual(self.client.delete("/notify-logs/1", headers=self.customer_headers()).status_code, 403)

        response = self.client.delete("/notify-logs/1", headers=self.admin_headers())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["title"], "Order Confirmed")
        self.assertEqual(self.client.get("/notify-logs/1", headers=self.customer_headers()).status_code, 404)

        missing = self.client.delete("/notify-logs/1", headers=self.admin_headers())
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json()["message"], "Notification not found")


if __name__ == "__main__":
    unittest.main()
