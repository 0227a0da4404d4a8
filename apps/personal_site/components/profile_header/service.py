"""
Profile Header Service
"""


class ProfileHeaderService:
    """Service for the Profile Header component"""

    def __init__(self, config):
        self.config = config

    def get_profile(self):
        """Get the profile with its social links in display order"""
        profile = dict(self.config['PROFILE'])
        profile['links'] = [dict(link) for link in self.config['SOCIAL_LINKS']]
        return profile
