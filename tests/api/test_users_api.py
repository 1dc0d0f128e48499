from tests.api.base import *  # noqa: F401,F403


class UserRecordApiTests(StorefrontApiBase):
    def _login(self, email, password="password"):
        return self.client.post("/token", json={"email": email, "password": password})

    def test_get_user_hides_password_hash(self):
        response = self.client.get(f"/users/{CUSTOMER_ID}", headers=self.staff_headers())
        self.assertEqual(response.status_code, 200, response.text)
        user = response.json()
        self.assertEqual(user["email"], "customer@example.com")
        self.assertNotIn("password_hash", user)

        self.assertEqual(self.client.get("/users/99", headers=self.staff_headers()).json()["message"], "User not found")
        self.assertEqual(self.client.get(f"/users/{ADMIN_ID}", headers=self.customer_headers()).status_code, 403)
        self.assertEqual(self.client.get(f"/users/{ADMIN_ID}").status_code, 401)

    def test_create_user_can_log_in(self):
        response = self.client.post(
            "/users",
            json={"name": "Second Staff", "email": "Staff2@Example.com", "password": "secret1", "role": "staff"},
            headers=self.owner_headers(),
        )
        self.assertEqual(response.status_code, 201, response.text)
        body = response.json()
        self.assertEqual(body["message"], "User created successfully")
        self.assertEqual(body["data"]["email"], "staff2@example.com")
        self.assertEqual(body["data"]["permissions"], ["staff"])
        self.assertNotIn("password_hash", body["data"])
        self.assertNotIn("password", body["data"])

        login = self._login("staff2@example.com", "secret1")
        self.assertEqual(login.status_code, 200)
        self.assertEqual(login.json()["role"], "staff")

    def test_create_rejects_duplicate_email_and_unknown_role(self):
        duplicate = self.client.post(
            "/users",
            json={"name": "Twin", "email": "customer@example.com", "password": "secret1"},
            headers=self.admin_headers(),
        )
        self.assertEqual(duplicate.status_code, 400)
        self.assertEqual(duplicate.json()["message"], "User with this email already exists")

        bad_role = self.client.post(
            "/users",
            json={"name": "Odd", "email": "odd@example.com", "password": "secret1", "role": "wizard"},
            headers=self.admin_headers(),
        )
        self.assertEqual(bad_role.status_code, 400)
        self.assertEqual(bad_role.json()["message"], "Validation failed")

    def test_only_super_admin_grants_super_admin(self):
        payload = {"name": "Climber", "email": "climber@example.com", "password": "secret1", "role": "super_admin"}
        self.assertEqual(self.client.post("/users", json=payload, headers=self.owner_headers()).status_code, 403)
        self.assertEqual(self.client.post("/users", json=payload, headers=self.staff_headers()).status_code, 403)
        self.assertEqual(self.client.post("/users", json=payload, headers=self.admin_headers()).status_code, 201)

    def test_update_user(self):
        response = self.client.put(
            f"/users/{STAFF_ID}",
            json={"name": "Senior Staff", "role": "store_owner", "password": "newpass1"},
            headers=self.admin_headers(),
        )
        self.assertEqual(response.status_code, 200, response.text)
        data = response.json()["data"]
        self.assertEqual(data["name"], "Senior Staff")
        self.assertEqual(data["permissions"], ["store_owner", "staff"])
        self.assertEqual(self._login("staff@example.com", "newpass1").status_code, 200)
        self.assertEqual(self._login("staff@example.com").status_code, 401)

    def test_update_email_must_stay_unique(self):
        taken = self.client.put(f"/users/{STAFF_ID}", json={"email": "owner@example.com"}, headers=self.admin_headers())
        self.assertEqual(taken.status_code, 400)
        same = self.client.put(f"/users/{STAFF_ID}", json={"email": "staff@example.com"}, headers=self.admin_headers())
        self.assertEqual(same.status_code, 200)

    def test_delete_user(self):
        response = self.client.delete(f"/users/{CUSTOMER_ID}", headers=self.admin_headers())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["email"], "customer@example.com")
        self.assertNotIn("password_hash", response.json()["data"])
        self.assertEqual(self.client.get(f"/users/{CUSTOMER_ID}", headers=self.admin_headers()).status_code, 404)

    def test_admin_cannot_be_deleted(self):
        response = self.client.delete(f"/users/{ADMIN_ID}", headers=self.admin_headers())
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Cannot delete admin users")
        self.assertEqual(self.client.delete(f"/users/{CUSTOMER_ID}", headers=self.staff_headers()).status_code, 403)


class UserAccountActionTests(StorefrontApiBase):
    def _active(self, user_id):
        return self.client.get(f"/users/{user_id}", headers=self.admin_headers()).json()["is_active"]

    def test_deactivate_and_activate(self):
        response = self.client.patch(f"/users/{CUSTOMER_ID}/deactivate", headers=self.owner_headers())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "User deactivated successfully")
        self.assertFalse(self._active(CUSTOMER_ID))
        login = self.client.post("/token", json={"email": "customer@example.com", "password": "password"})
        self.assertEqual(login.status_code, 403)

        response = self.client.patch(f"/users/{CUSTOMER_ID}/activate", headers=self.owner_headers())
        self.assertEqual(response.json()["message"], "User activated successfully")
        self.assertTrue(self._active(CUSTOMER_ID))

    def test_admin_cannot_be_deactivated(self):
        response = self.client.patch(f"/users/{ADMIN_ID}/deactivate", headers=self.admin_headers())
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Cannot deactivate admin users")
        self.assertEqual(self.client.patch("/users/99/activate", headers=self.admin_headers()).status_code, 404)

    def test_block_and_unblock(self):
        blocked = self.client.post("/users/block-user", json={"user_id": STAFF_ID}, headers=self.admin_headers())
        self.assertEqual(blocked.status_code, 200)
        self.assertEqual(blocked.json()["message"], "User blocked successfully")
        self.assertFalse(self._active(STAFF_ID))

        unblocked = self.client.post("/users/unblock-user", json={"user_id": STAFF_ID}, headers=self.admin_headers())
        self.assertEqual(unblocked.json()["message"], "User unblocked successfully")
        self.assertTrue(self._active(STAFF_ID))

    def test_block_guards(self):
        admin = self.client.post("/users/block-user", json={"user_id": ADMIN_ID}, headers=self.owner_headers())
        self.assertEqual(admin.status_code, 400)
        self.assertEqual(admin.json()["message"], "Cannot block admin users")
        self.assertEqual(self.client.post("/users/block-user", json={}, headers=self.admin_headers()).status_code, 400)
        missing = self.client.post("/users/block-user", json={"user_id": 99}, headers=self.admin_headers())
        self.assertEqual(missing.status_code, 404)
        denied = self.client.post("/users/block-user", json={"user_id": CUSTOMER_ID}, headers=self.staff_headers())
        self.assertEqual(denied.status_code, 403)

    def test_make_admin_is_super_admin_only(self):
        denied = self.client.post("/users/make-admin", json={"user_id": STAFF_ID}, headers=self.owner_headers())
        self.assertEqual(denied.status_code, 403)

        response = self.client.post("/users/make-admin", json={"user_id": STAFF_ID}, headers=self.admin_headers())
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["message"], "User promoted to admin successfully")
        self.assertEqual(body["data"]["role"], "super_admin")
        self.assertIn("store_owner", body["data"]["permissions"])


if __name__ == "__main__":
    unittest.main()
