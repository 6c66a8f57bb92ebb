# demo.py - run every repository operation once against the configured database
from . import repository as repo
from .connect_db import open_database
from .logging_config import setup_logging


def _report(label, result):
    if not result.ok:
        print(f" {label} failed: {result.error}")
    elif result.value is None:
        print(f" {label}: not found")
    else:
        print(f" {label}: {result.value}")
    return result


def run_demo(db):
    print("\n Step 1: Creating the sample person...")
    created = _report("createAndSavePerson", repo.create_and_save_person(db))
    if not created.ok:
        return False

    print("\n Step 2: Creating several people at once...")
    _report("createManyPeople", repo.create_many_people(db, [
        {"name": "Mary", "age": 31, "favoriteFoods": ["burrito", "salad"]},
        {"name": "Mary", "age": 45, "favoriteFoods": ["pizza"]},
        {"name": "John", "age": 27, "favoriteFoods": ["burrito"]},
        {"name": "Ana", "age": 19, "favoriteFoods": ["burrito", "tacos"]},
    ]))

    print("\n Step 3: Queries...")
    _report("findPeopleByName('Mary')", repo.find_people_by_name(db, "Mary"))
    _report("findOneByFood('burrito')", repo.find_one_by_food(db, "burrito"))
    person_id = created.value.id
    _report(f"findPersonById({person_id})", repo.find_person_by_id(db, person_id))

    print("\n Step 4: Updates...")
    _report("findEditThenSave", repo.find_edit_then_save(db, person_id))
    _report("findAndUpdate('John')", repo.find_and_update(db, "John"))

    print("\n Step 5: Query chain...")
    _report("queryChain", repo.query_chain(db))

    print("\n Step 6: Removals...")
    _report("removeById", repo.remove_by_id(db, person_id))
    _report("removeManyPeople", repo.remove_many_people(db))

    print("\n Document count:")
    print(f"   People: {repo.get_person_collection(db).count_documents({})}")
    return True


def main():
    setup_logging()
    with open_database() as db:
        run_demo(db)


if __name__ == "__main__":
    main()
