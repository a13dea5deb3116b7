from sqladmin import ModelView

from user_service.user.models import User


class UserAdmin(ModelView, model=User):
    name = "Patron"
    name_plural = "Patrons"
    icon = "fa-solid fa-id-card"

    column_list = [
        User.id,
        User.name,
        User.email,
        User.membership_type,
        User.is_active,
        User.registration_date,
    ]

    column_details_list = [
        User.id,
        User.name,
        User.email,
        User.membership_type,
        User.is_active,
        User.registration_date,
        User.phone,
        User.address,
    ]

    column_searchable_list = [User.name, User.email]

    column_sortable_list = [
        User.id,
        User.name,
        User.email,
        User.registration_date,
    ]

    # Email uniqueness and creation defaults are enforced by UserService.
    can_create = False
