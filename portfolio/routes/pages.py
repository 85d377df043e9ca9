def about_me():
    return {'page': 'about-me'}


def home():
    return {'page': 'home'}
