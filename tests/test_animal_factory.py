"""Tests for the animal factory."""

import pytest

from patterns import AnimalFactory, Cat, Dog, InvalidArgumentError, create_animal


class TestCreateAnimal:
    @pytest.mark.parametrize("kind", ["dog", "DOG", "Dog", "dOg"])
    def test_dog_any_case(self, kind):
        assert isinstance(create_animal(kind), Dog)

    @pytest.mark.parametrize("kind", ["cat", "CAT", "Cat"])
    def test_cat_any_case(self, kind):
        assert isinstance(create_animal(kind), Cat)

    @pytest.mark.parametrize("kind", ["bird", "", " dog", "dogs"])
    def test_unknown_kind_raises(self, kind):
        with pytest.raises(InvalidArgumentError, match="Unknown animal type"):
            create_animal(kind)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            create_animal("bird")

    def test_each_call_returns_new_instance(self):
        assert create_animal("dog") is not create_animal("dog")

    def test_class_entry_point(self):
        assert isinstance(AnimalFactory.create_animal("Cat"), Cat)


class TestSpeak:
    def test_dog_says_woof(self, capsys):
        create_animal("dog").speak()
        assert capsys.readouterr().out == "Woof!\n"

    def test_cat_says_meow(self, capsys):
        create_animal("cat").speak()
        assert capsys.readouterr().out == "Meow!\n"
