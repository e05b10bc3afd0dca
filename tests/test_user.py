from catfarm.user import User


def test_default_user_is_guest():
    user = User()
    assert user.name == "guess"
    assert user.password == ""


def test_user_with_score():
    user = User("alice", score=120)
    assert user.name == "alice"
    assert user.score == 120


def test_user_fields_are_mutable():
    password = "password"
    user = User("bob", password)
    user.score = 5
    user.name = "carol"
    assert (user.name, user.password, user.score) == ("carol", "password", 5)


def test_users_compare_by_value():
    assert User("dan", score=3) == User("dan", score=3)
    assert User("dan", score=3) != User("dan", score=4)