from rest_framework import serializers


class MenuItemSerializer(serializers.Serializer):
    type = serializers.CharField()
    label = serializers.CharField()
    icon = serializers.CharField(allow_null=True)
    link_url = serializers.CharField()
    index = serializers.IntegerField()
    sub_index = serializers.IntegerField()
    css_class = serializers.CharField(allow_blank=True)
    link_target = serializers.CharField()
    link_rel = serializers.CharField(allow_blank=True)
    sub_items = serializers.SerializerMethodField()

    def get_sub_items(self, obj):
        return MenuItemSerializer(obj.sub_items, many=True).data


class MainMenuSerializer(serializers.Serializer):
    items = MenuItemSerializer(many=True)
    selected_index = serializers.IntegerField()
    selected_sub_index = serializers.IntegerField()


class UserMenuSerializer(serializers.Serializer):
    name = serializers.CharField(allow_null=True)
    display_name = serializers.BooleanField()
    avatar_url = serializers.CharField(allow_null=True)
    display_avatar = serializers.BooleanField()
    items = MenuItemSerializer(many=True)
