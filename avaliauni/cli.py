"""Interactive text menu for students, institutions and their reviews."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import TextIO

from avaliauni.institutions import Institution, InstitutionStore
from avaliauni.reviews import Review, ReviewStore
from avaliauni.students import Student, StudentStore

USERNAME_MAX = 29
STUDENT_PASSWORD_MAX = 19
INSTITUTION_NAME_MAX = 49
COUNTRY_MAX = 24
INSTITUTION_PASSWORD_MAX = 19
REVIEW_TEXT_MAX = 399

LOGIN_PROMPT = "Senha: "
CHANGE_PROMPT = "Nova senha: "

_INT = re.compile(r"[+-]?\d+")


class _Console:
    """Reads answers line by line from a text stream."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def text(self, prompt: str = "", limit: int | None = None) -> str:
        print(prompt, end="", flush=True)
        raw = self._stream.readline()
        if not raw:
            raise EOFError
        answer = raw.split("\n", 1)[0]
        return answer if limit is None else answer[:limit]

    def number(self, prompt: str = "") -> int | None:
        match = _INT.match(self.text(prompt).strip())
        return int(match.group()) if match else None


class _Session:
    """One run of the menu loop over the three stores."""

    def __init__(
        self,
        students: StudentStore,
        institutions: InstitutionStore,
        reviews: ReviewStore,
        console: _Console,
    ):
        self.students = students
        self.institutions = institutions
        self.reviews = reviews
        self.console = console
        self.student: Student | None = None
        self.institution: Institution | None = None

    def run(self) -> None:
        try:
            keep_going = True
            while keep_going:
                if self.student is None and self.institution is None:
                    self._main_menu()
                if self.student is not None:
                    self._student_menu()
                if self.institution is not None:
                    self._institution_menu()
                answer = self.console.text("\nDeseja voltar ao menu? (s/n): ").strip()
                keep_going = answer[:1] in ("s", "S")
        except EOFError:
            print()

    # ----- not logged in -------------------------------------------------

    def _main_menu(self) -> None:
        print("\n===== MENU =====")
        print("1 - Login como Aluno")
        print("2 - Login como Instituicao")
        print("3 - Cadastrar novo Aluno")
        print("4 - Cadastrar nova Instituicao")
        option = self.console.number("Opcao: ")
        actions = {
            1: self._login_student,
            2: self._login_institution,
            3: self._register_student,
            4: self._register_institution,
        }
        action = actions.get(option)
        if action is None:
            print("Opcao invalida.")
        else:
            action()

    def _login_student(self) -> None:
        username = self.console.text("Nome de usuario: ", USERNAME_MAX)
        password = self.console.text(LOGIN_PROMPT, STUDENT_PASSWORD_MAX)
        if self.students.login(username, password):
            print("Login de aluno bem-sucedido!")
            self.student = self.students.get(username)
        else:
            print("Falha no login de aluno.")

    def _login_institution(self) -> None:
        institution_id = self.console.number("ID da instituicao: ")
        password = self.console.text(LOGIN_PROMPT, INSTITUTION_PASSWORD_MAX)
        if institution_id is not None and self.institutions.login(institution_id, password):
            print("Login de instituicao bem-sucedido!")
            self.institution = self.institutions.get(institution_id)
        else:
            print("Falha no login de instituicao.")

    def _register_student(self) -> None:
        username = self.console.text("Nome de usuario do novo aluno: ", USERNAME_MAX)
        password = self.console.text(LOGIN_PROMPT, STUDENT_PASSWORD_MAX)
        try:
            self.students.create(Student(username, password))
        except ValueError:
            print("Erro ao cadastrar aluno.")
        else:
            print("Aluno cadastrado com sucesso!")

    def _register_institution(self) -> None:
        name = self.console.text("Nome da instituicao: ", INSTITUTION_NAME_MAX)
        country = self.console.text("Pais da instituicao: ", COUNTRY_MAX)
        password = self.console.text(LOGIN_PROMPT, INSTITUTION_PASSWORD_MAX)
        try:
            new_id = self.institutions.create(Institution(name, country, password))
        except ValueError:
            print("Erro ao cadastrar instituicao.")
        else:
            print(f"Instituicao cadastrada com sucesso! ID - {new_id}")

    # ----- student -------------------------------------------------------

    def _student_menu(self) -> None:
        print("\n=== Menu do Aluno ===")
        print("1 - Modificar dados")
        print("2 - Deletar conta")
        print("3 - Visualizar perfil")
        print("4 - Buscar universidade e ver avaliacoes")
        option = self.console.number("Opcao: ")
        actions = {
            1: self._modify_student,
            2: self._delete_student,
            3: self._student_profile,
            4: self._browse_institution,
        }
        action = actions.get(option)
        if action is None:
            print("Opcao invalida.")
        else:
            action()

    def _modify_student(self) -> None:
        assert self.student is not None
        password = self.console.text(CHANGE_PROMPT, STUDENT_PASSWORD_MAX)
        try:
            self.students.modify(
                self.student.username, Student(self.student.username, password)
            )
        except LookupError:
            print("Erro ao modificar.")
        else:
            print("Dados modificados com sucesso!")

    def _delete_student(self) -> None:
        assert self.student is not None
        try:
            self.students.delete(self.student.username)
        except LookupError:
            print("Erro ao deletar conta.")
        else:
            print("Conta deletada.")
            self.student = None

    def _student_profile(self) -> None:
        assert self.student is not None
        print("\nPerfil do Aluno:")
        print(f"Usuario: {self.student.username}")
        own = self.reviews.by_author(self.student.username)
        if not own:
            print("Voce ainda nao fez nenhuma avaliacao.")
        else:
            print("\n--- Suas Avaliacoes ---")
            for review in own:
                print(f"- ID: {review.id} | Inst: {review.institution_id}")
                print(f'  "{review.text}"')

        print("\n--- Acoes ---")
        print("1 - Criar nova avaliacao")
        print("2 - Modificar avaliacao existente")
        print("3 - Deletar avaliacao")
        option = self.console.number("Opcao: ")
        actions = {
            1: self._create_review,
            2: self._modify_review,
            3: self._delete_review,
        }
        action = actions.get(option)
        if action is None:
            print("Opcao invalida.")
        else:
            action()

    def _create_review(self) -> None:
        assert self.student is not None
        institution_id = self.console.number("ID da instituicao que deseja avaliar: ")
        text = self.console.text("Texto da avaliacao: ", REVIEW_TEXT_MAX)
        if institution_id is None:
            print("Erro ao criar avaliacao.")
            return
        self.reviews.create(Review(institution_id, self.student.username, text))
        print("Avaliacao criada com sucesso!")

    def _own_review(self, prompt: str, verb: str) -> Review | None:
        assert self.student is not None
        review_id = self.console.number(prompt)
        existing = None if review_id is None else self.reviews.get(review_id)
        if existing is None:
            print("Avaliacao nao encontrada.")
            return None
        if existing.author != self.student.username:
            print(f"Voce nao tem permissao para {verb} esta avaliacao.")
            return None
        return existing

    def _modify_review(self) -> None:
        existing = self._own_review("ID da avaliacao a modificar: ", "modificar")
        if existing is None:
            return
        text = self.console.text("Novo texto: ", REVIEW_TEXT_MAX)
        try:
            self.reviews.modify(existing.id, text)
        except LookupError:
            print("Erro ao modificar avaliacao.")
        else:
            print("Avaliacao modificada com sucesso.")

    def _delete_review(self) -> None:
        existing = self._own_review("ID da avaliacao a deletar: ", "deletar")
        if existing is None:
            return
        try:
            self.reviews.delete(existing.id)
        except LookupError:
            print("Erro ao deletar avaliacao.")
        else:
            print("Avaliacao deletada com sucesso.")

    def _browse_institution(self) -> None:
        institution_id = self.console.number(
            "Digite o ID da universidade que deseja buscar: "
        )
        institution = None if institution_id is None else self.institutions.get(institution_id)
        if institution is None:
            print("Instituicao nao encontrada.")
            return
        print("\n--- Perfil da Instituicao ---")
        print(f"ID: {institution.id}")
        print(f"Nome: {institution.name}")
        print(f"Pais: {institution.country}")
        print("\n--- Avaliacoes ---")
        received = self.reviews.for_institution(institution.id)
        if not received:
            print("Nenhuma avaliacao encontrada para esta instituicao.")
        else:
            self._print_received(received)

    # ----- institution ---------------------------------------------------

    def _institution_menu(self) -> None:
        print("\n=== Menu da Instituicao ===")
        print("1 - Modificar dados")
        print("2 - Deletar conta")
        print("3 - Visualizar perfil")
        option = self.console.number("Opcao: ")
        actions = {
            1: self._modify_institution,
            2: self._delete_institution,
            3: self._institution_profile,
        }
        action = actions.get(option)
        if action is None:
            print("Opcao invalida.")
        else:
            action()

    def _modify_institution(self) -> None:
        assert self.institution is not None
        name = self.console.text("Novo nome: ", INSTITUTION_NAME_MAX)
        country = self.console.text("Novo pais: ", COUNTRY_MAX)
        password = self.console.text(CHANGE_PROMPT, INSTITUTION_PASSWORD_MAX)
        try:
            self.institutions.modify(
                self.institution.id,
                Institution(name, country, password, self.institution.id),
            )
        except (ValueError, LookupError):
            print("Erro ao modificar.")
        else:
            print("Dados modificados com sucesso!")

    def _delete_institution(self) -> None:
        assert self.institution is not None
        try:
            self.institutions.delete(self.institution.id)
        except LookupError:
            print("Erro ao deletar conta.")
        else:
            print("Conta deletada.")
            self.institution = None

    def _institution_profile(self) -> None:
        assert self.institution is not None
        print("\nPerfil da Instituicao:")
        print(f"Nome: {self.institution.name}")
        print(f"Pais: {self.institution.country}")
        print(f"ID: {self.institution.id}")
        print("\n--- Avaliacoes Recebidas ---")
        received = self.reviews.for_institution(self.institution.id)
        if not received:
            print("Nenhuma avaliacao ainda.")
        else:
            self._print_received(received)

    @staticmethod
    def _print_received(received: list[Review]) -> None:
        for review in received:
            print(f"- Avaliacao #{review.id} por {review.author}:")
            print(f'  "{review.text}"\n')


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="avaliauni",
        description="Students review institutions through a text menu.",
    )
    parser.add_argument(
        "--data-dir",
        default="arquivos",
        help="directory holding alunos.txt, instituicoes.txt and avaliacoes.txt",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the menu on standard input and output; return the exit status."""
    args = _parse_args(argv)
    data_dir = Path(args.data_dir)

    students = StudentStore(data_dir / "alunos.txt")
    institutions = InstitutionStore(data_dir / "instituicoes.txt")
    reviews = ReviewStore(data_dir / "avaliacoes.txt")

    students.load()
    institutions.load()
    try:
        reviews.load()
    except FileNotFoundError:
        print(f"cannot read {reviews.path}", file=sys.stderr)
        return 1

    _Session(students, institutions, reviews, _Console(sys.stdin)).run()

    students.save()
    institutions.save()
    reviews.save()

    print("Encerrando o programa...")
    return 0


if __name__ == "__main__":
    sys.exit(main())