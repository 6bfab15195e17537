import factory
from django.contrib.auth.models import Permission

from robots_txt_lite.models import Option


class UserFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = 'auth.User'
        skip_postgeneration_save = True

    username = factory.Sequence(lambda n: f"user{n}")
    email = factory.LazyAttribute(lambda o: f"{o.username}@example.com")
    password = factory.django.Password("password")
    is_staff = True


class ManagerFactory(UserFactory):
    """Staff user holding the manage_options permission."""

    @factory.post_generation
    def manage_options(obj, create, extracted, **kwargs):
        if not create:
            return
        obj.user_permissions.add(
            Permission.objects.get(codename='manage_options', content_type__app_label='robots_txt_lite')
        )


class OptionFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Option
        django_get_or_create = ('name',)

    name = factory.Sequence(lambda n: f"option{n}")
    value = ""
