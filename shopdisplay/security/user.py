from ..displayable import Displayable, write_line


class User(Displayable):
    def __init__(self, name: str = "BOB", email: str = "test@test.com") -> None:
        self._name = name
        self._email = email

    def render(self) -> str:
        # 이메일 형식 검증 없음
        return f"{self._name} - {self._email}"

    def display(self) -> None:
        write_line(self.render())

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> "User":
        self._name = name
        return self

    def get_email(self) -> str:
        return self._email

    def set_email(self, email: str) -> "User":
        self._email = email
        return self
