from tests.api.base import *  # noqa: F401,F403


class ContentListingTests(StorefrontApiBase):
    def _ids(self, path, **params):
        response = self.client.get(path, params=params)
        self.assertEqual(response.status_code, 200, response.text)
        return [row["id"] for row in response.json()["data"]]

    def test_every_content_resource_lists_with_laravel_envelope(self):
        for path in (
            "/attributes",
            "/manufacturers",
            "/authors",
            "/questions",
            "/feedbacks",
            "/refund-reasons",
            "/refund-policies",
            "/store-notices",
            "/terms-and-conditions",
            "/delivery-times",
            "/languages",
            "/flash-sale",
        ):
            body = self.client.get(path).json()
            self.assertEqual(set(body), {"data", "links", "meta"}, path)
            self.assertEqual(body["meta"]["per_page"], 50, path)
            self.assertEqual(body["meta"]["path"], path)

    def test_delivery_times_sorted_by_minimum_duration(self):
        self.assertEqual(self._ids("/delivery-times"), [2, 4, 1, 3])
        self.assertEqual(self._ids("/delivery-times", active="false"), [3])

    def test_name_ordered_lookups(self):
        reasons = self.client.get("/refund-reasons").json()["data"]
        self.assertEqual([row["name"] for row in reasons][:2], ["Changed Mind", "Not as Described"])
        self.assertEqual(self._ids("/refund-reasons", language="es"), [5])
        self.assertEqual(self._ids("/languages"), [3, 1, 4, 2])
        self.assertEqual(self._ids("/languages", is_rtl="true"), [3])

    def test_newest_first_with_filters(self):
        self.assertEqual(self._ids("/manufacturers"), [3, 2, 1])
        self.assertEqual(self._ids("/manufacturers", is_approved="true"), [2, 1])
        self.assertEqual(self._ids("/questions", product_id=1), [3])
        self.assertEqual(self._ids("/feedbacks", abusive="true"), [3])
        self.assertEqual(self._ids("/store-notices", priority="high"), [1])
        self.assertEqual(self._ids("/refund-policies", target="vendor"), [3])
        self.assertEqual(self._ids("/flash-sale", sale_status="active"), [1])
        self.assertEqual(self._ids("/terms-and-conditions", search="privacy"), [2])

    def test_attributes_are_read_only(self):
        self.assertEqual(self._ids("/attributes", search="leather"), [3])
        self.assertEqual(self.client.get("/attributes/size").json()["name"], "Size")
        self.assertEqual(self.client.post("/attributes", json={"name": "Fit"}, headers=self.admin_headers()).status_code, 405)
        self.assertEqual(self.client.delete("/attributes/1", headers=self.admin_headers()).status_code, 405)


class ContentWriteTests(StorefrontApiBase):
    def test_delivery_time_duration_order(self):
        payload = {"title": "Next Week", "description": "Slow lane", "minimum_duration": 9, "maximum_duration": 2, "duration_unit": "day"}
        response = self.client.post("/delivery-times", json=payload, headers=self.admin_headers())
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Minimum duration cannot be greater than maximum duration")

        payload["maximum_duration"] = 12
        created = self.client.post("/delivery-times", json=payload, headers=self.admin_headers())
        self.assertEqual(created.status_code, 201, created.text)
        self.assertEqual(created.json()["data"]["slug"], "next-week")

        shrink = self.client.put("/delivery-times/1", json={"maximum_duration": 2}, headers=self.admin_headers())
        self.assertEqual(shrink.status_code, 400)

    def test_language_code_is_unique(self):
        duplicate = self.client.post("/languages", json={"name": "Inglés", "code": "EN"}, headers=self.admin_headers())
        self.assertEqual(duplicate.status_code, 400)
        self.assertEqual(duplicate.json()["message"], "Language with this code already exists")

        created = self.client.post("/languages", json={"name": "German", "code": "de"}, headers=self.admin_headers())
        self.assertEqual(created.status_code, 201)
        self.assertFalse(created.json()["data"]["is_default"])

    def test_customer_question_waits_for_approval(self):
        response = self.client.post(
            "/questions",
            json={"product_id": 2, "question": "Do they run true to size?"},
            headers=self.customer_headers(),
        )
        self.assertEqual(response.status_code, 201, response.text)
        question = response.json()["data"]
        self.assertEqual(question["user_id"], CUSTOMER_ID)
        self.assertFalse(question["is_approved"])

        approve = self.client.put(f"/questions/{question['id']}", json={"is_approved": True}, headers=self.customer_headers())
        self.assertFalse(approve.json()["data"]["is_approved"])
        answer = self.client.put(
            f"/questions/{question['id']}",
            json={"answer": "Yes", "is_approved": True},
            headers=self.staff_headers(),
        )
        self.assertTrue(answer.json()["data"]["is_approved"])
        self.assertEqual(self.client.delete("/questions/2", headers=self.customer_headers()).status_code, 403)

    def test_feedback_belongs_to_its_author(self):
        response = self.client.post(
            "/feedbacks",
            json={"model_type": "product", "model_id": 4, "positive": True},
            headers=self.customer_headers(),
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["data"]["user_id"], CUSTOMER_ID)
        self.assertEqual(self.client.delete("/feedbacks/2", headers=self.customer_headers()).status_code, 403)
        self.assertEqual(self.client.delete("/feedbacks/1", headers=self.customer_headers()).status_code, 200)

    def test_store_notice_records_creator(self):
        response = self.client.post(
            "/store-notices",
            json={"notice": "Holiday hours", "priority": "LOW", "shop_id": 1},
            headers=self.staff_headers(),
        )
        self.assertEqual(response.status_code, 201, response.text)
        data = response.json()["data"]
        self.assertEqual(data["creator_id"], STAFF_ID)
        self.assertEqual(data["priority"], "low")
        self.assertEqual(self.client.post("/store-notices", json={"notice": "x"}, headers=self.customer_headers()).status_code, 403)

    def test_catalog_managers_own_brand_content(self):
        payload = {"name": "Bose"}
        self.assertEqual(self.client.post("/manufacturers", json=payload, headers=self.staff_headers()).status_code, 403)
        created = self.client.post("/manufacturers", json=payload, headers=self.owner_headers())
        self.assertEqual(created.status_code, 201)
        self.assertEqual(created.json()["data"]["slug"], "bose")
        sale = self.client.post(
            "/flash-sale",
            json={"title": "Spring Clearance", "rate": 15},
            headers=self.admin_headers(),
        )
        self.assertEqual(sale.json()["data"]["slug"], "spring-clearance")
        self.assertEqual(sale.json()["data"]["sale_status"], "upcoming")


if __name__ == "__main__":
    unittest.main()
