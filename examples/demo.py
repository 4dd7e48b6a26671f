from __future__ import annotations

from _infra import Person, banner, show

from lawful import (
    STRING,
    Err,
    List,
    Ok,
    Result,
    TraversableList,
    Writer,
    attr_lens,
    lens,
)


def demo_functor() -> None:
    ok_result: Result[int, str] = Ok(5)
    show("Functor Example", ok_result.map(lambda x: x + 1))


def demo_applicative() -> None:
    ok_result: Result[int, str] = Ok(5)
    increment = Ok.of(lambda x: x + 1)
    show("Applicative Example", ok_result.ap(increment))


def demo_monad() -> None:
    ok_result: Result[int, str] = Ok(5)
    show("Monad Example", ok_result.flat_map(lambda x: Ok(x + 1)))

    err_result: Result[int, str] = Err("Something went wrong")
    show("Monad Error Example", err_result.flat_map(lambda x: Ok(x + 1)))


def demo_string_monoid() -> None:
    greeting = STRING.concat("Hello", STRING.concat(" World", STRING.empty()))
    show("String Monoid Example", greeting)


def demo_foldable() -> None:
    numbers = List([1, 2, 3, 4])
    show("Foldable Example", numbers.reduce(lambda acc, value: acc + value, 0))


def demo_traversable() -> None:
    show("Traversable Example", TraversableList([1, 2, 3]).traverse(lambda x: Ok.of(x + 1)))

    def checked(x: int) -> Result[int, str]:
        return Err(f"bad: {x}") if x == 2 else Ok(x)

    show("Traversable Error Example", TraversableList([1, 2, 3]).traverse(checked))


def demo_writer() -> None:
    def halve(x: int) -> Writer[int, str]:
        return Writer(x // 2, [f"halved {x}"])

    # Same traverse, different applicative: logs from every element are kept in order.
    traced = TraversableList([10, 20]).traverse(halve, pure=Writer.pure)
    show("Writer Example", traced)


def demo_lens() -> None:
    name = lens(
        lambda person: person.name,
        lambda new_name, person: Person(new_name, person.age),
    )
    person = Person("John", 30)
    show("Lens Example", name.set(name.get(person) + "y", person))

    age = attr_lens("age")
    show("Lens Modify Example", age.modify(lambda years: years + 1, person))


def main() -> None:
    banner("lawful demo")
    demo_functor()
    demo_applicative()
    demo_monad()
    demo_string_monoid()
    demo_foldable()
    demo_traversable()
    demo_writer()
    demo_lens()


if __name__ == "__main__":
    main()
